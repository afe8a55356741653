"""
ゴブレットのルールエンジンのセットアップスクリプト
"""

from setuptools import setup, find_packages

setup(
    name="gobblet",
    version="1.0.0",
    description="ゴブレット - 4x4の重ね置きボードゲームのルールエンジン",
    author="",
    packages=find_packages(include=["src", "src.*"]),
    package_dir={"": "."},
    python_requires=">=3.11",
    install_requires=[
        "pydantic>=2.11.10",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "hypothesis>=6.0.0",
        ],
    },
)
