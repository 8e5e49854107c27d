"""Setup configuration for portfolio-tui package."""

from setuptools import setup, find_packages
from pathlib import Path

# Read the README file
readme_file = Path(__file__).parent / "README.md"
long_description = (
    readme_file.read_text(encoding="utf-8") if readme_file.exists() else ""
)

setup(
    name="portfolio-tui",
    version="1.0.0",
    description="Terminal portfolio with an accessible contact form, filterable projects and image asset tooling",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*", "docs", "docs.*"]),
    package_data={
        "portfolio.tui": ["portfolio.tcss"],
        "portfolio.tui.data": ["*.yaml"],
    },
    python_requires=">=3.9",
    install_requires=[
        "pyyaml>=6.0",
        "textual>=8.2.8",
        "Pillow>=10.0.0",  # For image optimization
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "black>=22.0.0",
            "flake8>=5.0.0",
            "mypy>=0.990",
        ],
    },
    entry_points={
        "console_scripts": [
            "portfolio=portfolio.tui.__main__:main",
            "portfolio-optimize-images=scripts.optimize_images:main",
            "portfolio-image-dimensions=scripts.image_dimensions:main",
        ],
    },
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
    ],
    keywords="portfolio textual tui accessibility forms image-optimization",
)
