"""nthirred setup script.

Options:                python setup.py --help
Install by admin/root:  python setup.py install
Install by user:        python setup.py install --user
Install options:        python setup.py install --help
"""

from setuptools import setup
import nthirred

with open('README.md', 'r') as f:
    LONG_DESCRIPTION = f.read()

setup(
    name='nthirred',
    version=nthirred.__version__,
    description='nthirred -- the n-th irreducible binary polynomial',
    long_description=LONG_DESCRIPTION,
    long_description_content_type='text/markdown',
    keywords=['GF(2)', 'binary polynomials', 'irreducible polynomials',
              'finite fields', 'sieve', 'dynamic programming'],
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'Intended Audience :: Education',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3 :: Only',
        'Topic :: Scientific/Engineering :: Mathematics',
        'Topic :: Software Development :: Libraries :: Python Modules'
    ],
    license=nthirred.__license__,
    packages=['nthirred'],
    platforms=['any'],
    install_requires=['numpy>=1.20'],
    python_requires='>=3.8'
)
