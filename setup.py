#!/usr/bin/env python3
#
# Copyright (c) 2020-2021 Tatu Ylonen.  See LICENSE and https://ylonen.org

from setuptools import setup

with open("README.md", "r") as f:
    long_description = f.read()

setup(name="wikitexttree",
      version="0.1.0",
      description="Tokenizer and parse tree builder for WikiMedia markup (WikiText)",
      long_description=long_description,
      long_description_content_type="text/markdown",
      author="Tatu Ylonen",
      author_email="ylo@clausal.com",
      license="MIT",
      python_requires=">=3.9",
      packages=["wikitexttree"],
      install_requires=[],
      extras_require={"test": ["pytest"]},
      entry_points={
          "console_scripts": ["wikitexttree=wikitexttree.__main__:main"],
      },
      keywords=[
          "wikipedia",
          "wikitext",
          "tokenizer",
          "parser",
      ],
      classifiers=[
          "Development Status :: 3 - Alpha",
          "Intended Audience :: Developers",
          "License :: OSI Approved :: MIT License",
          "Natural Language :: English",
          "Operating System :: OS Independent",
          "Programming Language :: Python",
          "Programming Language :: Python :: 3 :: Only",
          "Topic :: Text Processing",
          "Topic :: Text Processing :: Markup",
          ])
