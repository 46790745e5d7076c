import os
from setuptools import setup

about = {}
with open(os.path.join(os.path.dirname(__file__), 'nparray', 'version.py')) as fp:
    exec(fp.read(), about)

test = ['pytest>=6.0.0']

extras_require = {
    'test': test
}

setup(
    name='pynparray',
    version=about['version'],
    packages=['nparray', 'nparray._hl', 'nparray.utils'],
    license='GNU General Public License v3 (GPLv3)',
    author='gsicard',
    description='N-dimensional arrays with .npy file persistence',
    python_requires='>=3.7',
    install_requires=[
        'numpy>=1.17.0'
    ],
    extras_require=extras_require
)
