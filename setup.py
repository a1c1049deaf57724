from setuptools import setup, find_packages

setup(
    name="unichat",
    version="0.1.0",
    description="One chat call shape over Gemini, OpenAI and self-hosted backends, switchable at runtime",
    author="Mudakka",
    license="CC BY-NC 4.0",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.7.1",
        "python-dotenv>=1.0.1",
        "requests>=2.31.0",
        "google-genai>=1.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.4"],
    },
    include_package_data=True,
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: Creative Commons Attribution Non-Commercial 4.0 International License",
        "Operating System :: OS Independent",
    ],
)
