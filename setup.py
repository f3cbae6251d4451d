from setuptools import find_packages, setup

setup(
    name='pyAerodrome',
    version='0.1.0',
    packages=find_packages('src'),
    package_dir={'': 'src'},
    url='',
    download_url='',
    keywords=['weather', 'metar', 'aviation'],
    classifiers=[],
    license='Apache',
    description=('Decoder for METAR/SPECI aerodrome weather reports.'),
    python_requires='>=3.9',
    install_requires=[
        'metpy',
        'numpy',
        'pint',
        'pydantic>=2',
    ],
    extras_require={
        'test': ['pytest'],
    },
    include_package_data=True,
)
