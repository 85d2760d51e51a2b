from setuptools import setup

# install with: pip install -e .

setup(
    name='wordplay',
    version='0.1.0',
    packages=['wordplay'],
    python_requires='>=3.8',
    install_requires=[
        'click>=8.0',
        'rich',
        'blinker>=1.4',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'wordplay = wordplay.matcherui:cli',
        ],
    },
)
