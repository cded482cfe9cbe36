from setuptools import setup, find_packages

setup(
    name="signal-registry",
    version="1.0.0",
    description="Nickname directory, contact books and chat signaling for peer-to-peer clients",
    author="Signal Registry Team",
    packages=find_packages(include=["signal_registry", "signal_registry.*"]),
    install_requires=[
        "boto3>=1.34.0",
        "pynamodb>=6.0.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "moto[dynamodb,events,ssm]>=5.0.0",
        ],
    },
    python_requires=">=3.9",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
    ],
)
