from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="smlbox-uploader",
    version="1.0.0",
    author="radist2s",
    description="A CLI tool to sync an M3U or XSPF playlist into the smlbox channel panel",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/radist2s/smlbox-playlist-uploader",
    packages=find_packages(),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.7",
    install_requires=[
        "beautifulsoup4",
        "requests",
        "python-dotenv",
        "termcolor",
        "colorama",
        "art",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "smlbox-uploader=smlbox_uploader.cli:main",
            "smlu=smlbox_uploader.cli:main",
        ],
    },
)
