from glob import glob
from setuptools import setup


TESTS_REQUIRE = [
    'pytest',
    'pytest-cov',
    'coverage',
    'flake8',
]


setup(
    name='rpncalc',
    use_scm_version={'fallback_version': '0.1.0'},
    description='RPN calculator with step traces and a session history',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    packages=['rpncalc'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.6',
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    setup_requires=[
        'setuptools_scm',
    ],
    tests_require=TESTS_REQUIRE,
    extras_require={
        'test': TESTS_REQUIRE,
    },
    scripts=glob('bin/*'),
    license='ISC',
)
