"""Controllers for the portfolio screen.

Each controller owns one part of the screen and is constructed with
references to the widgets it drives:

    validation   - pure field validation rules
    annotator    - renders verdicts onto fields and their error text
    form         - contact form validation state machine
    disclosure   - navigation menu open/closed state
    filter       - project card filtering
    reveal       - one-shot scroll reveal
    back_to_top  - back-to-top button
"""
