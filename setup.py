from setuptools import setup

# python setup.py check
# python setup.py sdist
# python setup.py bdist_wheel --universal
# twine upload dist/*

_desc = """PyPageViews fetches the page view count of a single page path from Google Analytics 4
using a service account key."""

setup(
    name='pypageviews',
    version='0.1.0',
    description=_desc,
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    url='https://github.com/Blink-SEO/pypageviews',
    author='Joshua Prettyman',
    author_email='joshua@blinkseo.co.uk',
    license='MIT',
    packages=['pypageviews', 'pypageviews.utils'],
    install_requires=[
        'google-analytics-data>=0.16.1',
        'google-auth>=2.15.0',
        'google-api-core>=2.11.0'
    ],
    extras_require={
        'test': ['pytest']
    },
    classifiers=[
        "Intended Audience :: Developers",
        'Development Status :: 1 - Planning',
        'License :: OSI Approved :: MIT License',
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
    ],
)
