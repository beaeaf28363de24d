from setuptools import setup

setup(
    name="chesspieces",
    version="0.1.0",
    description="Chess piece models with validated attributes and promotion/castling queries",
    packages=["chesspieces"],
    py_modules=["piece_cli"],
    python_requires=">=3.8",
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "hypothesis>=6.0.0",
        ],
    },
    entry_points={
        "console_scripts": ["piece-cli=piece_cli:main"],
    },
)
