from setuptools import setup, find_packages

setup(
    name='basic-lang',
    version='0.1.0',
    package_dir={'': 'src'},
    packages=find_packages('src'),
    install_requires=['pyarrow'],  # Tabular results and CSV export
    extras_require={
        'test': ['pytest>=7'],
    },
    entry_points={
        'console_scripts': [
            'basic=basic_lang.cli:main'  # Entry point to the REPL / file runner
        ]
    },
    author='Basic Lang Team',
    description='A line-at-a-time arithmetic interpreter: lexer, precedence parser and evaluator',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    license='LGPLv3.0',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: GNU Lesser General Public License v3 (LGPLv3)',
        'Programming Language :: Python :: 3',
    ],
    python_requires='>=3.8',
)
