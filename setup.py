from setuptools import setup, find_packages

setup(
    name="exact_kp",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"exact_kp": ["configs/*.yaml"]},
    python_requires=">=3.8",
    install_requires=[
        "pyyaml",
        "pandas",
        "matplotlib",
        "seaborn",
        "tqdm",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'kp-solve = Scripts.solve:main',
            'generate = Scripts.generate_data:main',
            'evaluate = Scripts.evaluate_solvers:main',
        ],
    }
)
