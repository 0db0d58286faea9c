"""
Metro Route Planner - Package Build Script

This script packages the route planning service (graph search, fare table,
path narration and the FastAPI surface) together with the bundled network data.
"""

from setuptools import setup, find_namespace_packages


setup(
    name='metro-route-planner',
    version='1.0.0',
    author='Metro Route Planner Team',
    description='Shortest-distance / shortest-time metro route planner',
    long_description='''
    Dijkstra based route planner for a small metro network. Computes the
    route between two stations by distance or travel time, estimates the
    fare from a distance band table and narrates the path with line changes.
    ''',
    # app, app.api 등은 __init__.py 없는 namespace package
    packages=find_namespace_packages(include=['app', 'app.*']),
    package_data={'app.data': ['*.json']},
    include_package_data=True,
    install_requires=[
        'fastapi>=0.100.0',
        'uvicorn>=0.23.0',
        'pydantic>=2.0',
        'python-dotenv>=1.0.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
            'pytest-mock>=3.10',
            'httpx>=0.24.0',
        ],
    },
    zip_safe=False,
    python_requires='>=3.10',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ],
)
