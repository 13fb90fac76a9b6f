"""
Setup configuration for Vivify
"""
from setuptools import setup, find_namespace_packages
from pathlib import Path

# Read README
readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text(encoding="utf-8") if readme_file.exists() else ""

setup(
    name="vivify-ui",
    version="1.0.0",
    description="Generative UI - turn prompts, sketches, screenshots and PDFs into working single-page web apps",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="Vivify Team",
    license="Apache-2.0",
    packages=find_namespace_packages(include=["core", "services"]),
    py_modules=["app", "mcp_server"],
    python_requires=">=3.10",
    install_requires=[
        "mcp>=1.2.0,<2",
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        "python-dotenv>=1.0.0",
        "langchain-core>=0.3.0",
        "langchain-google-genai>=2.1.0",
        "langchain-openai>=0.3.0",
        "gradio>=6.0.0",
        "pillow>=10.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "black>=23.0",
            "flake8>=6.0",
            "mypy>=1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "vivify-mcp=mcp_server:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Web Environment",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Natural Language :: Portuguese (Brazilian)",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: User Interfaces",
    ],
    keywords=[
        "generative-ui",
        "gemini",
        "langchain",
        "gradio",
        "html",
        "tailwind",
        "mcp",
    ],
)
