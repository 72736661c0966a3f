from setuptools import setup, find_packages

setup(
    name='rigid',
    version='1.0.0',
    description='Rigid rotations in the plane and in space as orthogonal matrices or unit quaternions',
    packages=find_packages(include=['rigid', 'rigid.*']),
    python_requires='>=3.11',
    install_requires=['numpy'],
    extras_require={'test': ['pytest']},
)
