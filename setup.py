# coding=utf-8
# Copyright 2018 The Google AI Language Team Authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Install the translation rule core."""
import os

from setuptools import find_packages, setup


def read(fname):
  with open(os.path.join(os.path.dirname(__file__), fname)) as f:
    return f.read()


setup(
    name="mtcore",
    version="0.0.1.dev",
    packages=find_packages(include=["mtcore", "mtcore.*"]),
    description="Synchronous grammar rules for hypergraph MT decoding.",
    long_description=read("README.md"),
    license="Apache 2.0",
    python_requires=">=3.7",
    install_requires=[
        "absl-py",
        "numpy",
        "tensorflow",
        "typing_extensions",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
