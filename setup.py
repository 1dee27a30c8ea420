from setuptools import setup, find_packages
import re

# Read version from azpay/__init__.py
with open('azpay/__init__.py') as f:
    version = re.search(r'^__version__ = ["\']([^"\']+)["\']', f.read(), re.MULTILINE).group(1)

setup(
    name='azpay',
    version=version,
    packages=find_packages(include=['azpay', 'azpay.*']),
    package_data={
        'azpay': ['tax_rules/*.yaml'],
    },
    install_requires=[
        'PyYAML>=6.0',
        'click>=8.0',
        'pydantic>=2.0.0',
        'rich>=13.0',
    ],
    extras_require={
        'mcp': [
            'mcp[cli]>=1.0.0,<2',
        ],
        'test': [
            'pytest>=7.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'azpay=azpay.cli.__main__:main',
            'azpay-mcp=azpay.mcp.server:run_server',
        ],
    },
    author='Personal',
    description='Azerbaijan gross/net salary and payroll tax calculator.',
    python_requires='>=3.10',
)
