"""gf256 setup script.

Options:                python setup.py --help
Install by admin/root:  python setup.py install
Install by user:        python setup.py install --user
Install options:        python setup.py install --help
"""

from setuptools import setup
import gf256

with open('README.md', 'r', encoding='utf-8') as f:
    LONG_DESCRIPTION = f.read()

setup(
    name='gf256',
    version=gf256.__version__,
    description='gf256 -- Arithmetic over GF(2^8) and polynomials over GF(2^8)',
    long_description=LONG_DESCRIPTION,
    long_description_content_type='text/markdown',
    keywords=['finite field', 'Galois field', 'GF(256)', 'Reed-Solomon',
              'error correction', 'polynomial arithmetic'],
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
    license=gf256.__license__,
    packages=['gf256'],
    platforms=['any'],
    install_requires=['numpy'],
    extras_require={'test': ['pytest']},
    python_requires='>=3.9'
)
