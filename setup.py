from setuptools import setup, find_packages

import aarduca


def get_setup_args():
    setup_args = setup_common()
    setup_args['options'] = options_common()
    return setup_args


def setup_common():
    return dict(name=aarduca.__appname__,
                version=aarduca.__version__,
                packages=find_packages(exclude=['tests']),
                install_requires=['simplejson'],
                extras_require={'test': ['pytest'],
                                'icu': ['PyICU >= 2.0']},
                author="Igor Tkach",
                author_email="itkach@aarddict.org",
                description='Unicode Collation Algorithm with DUCET loading '
                            'and ICU style tailoring rules.',
                license="GPL 3",
                keywords=['aarddict', 'collation', 'unicode', 'uca', 'ducet',
                          'sorting'],
                url="http://aarddict.org",
                classifiers=['Development Status :: 4 - Beta',
                             'Operating System :: OS Independent',
                             'Programming Language :: Python',
                             'Programming Language :: Python :: 3',
                             'License :: OSI Approved :: GNU General Public License (GPL)',
                             'Topic :: Text Processing :: Linguistic',
                             ]
                )


def options_common():
    return {'sdist': {'formats': 'zip'}}


setup(**get_setup_args())
