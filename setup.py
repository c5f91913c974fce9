import setuptools

setuptools.setup(
    name = 'zpgeom',
    version = '0.1',
    description = 'generic parametric curve algebra',
    packages = setuptools.find_packages(exclude=['tests']),
    install_requires=['numpy'],
    extras_require={'test': ['pytest']},
)
