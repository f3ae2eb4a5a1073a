from setuptools import setup, find_packages

setup(
    name='graph-command-editor',
    version='1.0.0',
    description='Interactive command-driven editor for small directed graphs',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'click>=8.0',
        'lxml>=6.0.0',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': [
            'graph-editor = graph_editor.cli.main:main',
        ],
        'graph_editor.exporter': [
            'dot = dot_exporter.plugin:GraphVizExporter',
            'json = json_exporter.plugin:JsonExporter',
            'fdg = fdg_exporter.plugin:FdgExporter',
        ],
    },
    python_requires='>=3.10',
)
