from setuptools import setup, find_packages
import re

# Read version from rescisao/__init__.py
with open('rescisao/__init__.py') as f:
    version = re.search(r'^__version__ = ["\']([^"\']+)["\']', f.read(), re.MULTILINE).group(1)

setup(
    name='rescisao-calc',
    version=version,
    packages=find_packages(exclude=['tests', 'tests.*']),
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
            'rescisao-calc=rescisao.cli.__main__:main',
            'rescisao-calc-mcp=rescisao.mcp.server:run_server',
        ],
    },
    author='Personal',
    description='Brazilian employment termination (rescisão CLT) calculator.',
    python_requires='>=3.10',
)
