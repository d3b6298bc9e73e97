"""
Setup configuration for unibucket package.
"""
from setuptools import setup, find_packages
from pathlib import Path

# Read README
readme_file = Path(__file__).parent / 'README.md'
long_description = readme_file.read_text() if readme_file.exists() else ''

S3_REQUIRES = ['boto3>=1.26.0']
GCS_REQUIRES = ['google-cloud-storage>=2.10.0']
AZURE_REQUIRES = ['azure-storage-blob>=12.14.0']

setup(
    name='unibucket',
    version='0.1.0',
    description='One key-value bucket interface over S3, GCS, Azure Blob Storage and the local filesystem',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=find_packages(exclude=['tests', 'tests.*']),
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Topic :: Software Development :: Libraries :: Python Modules',
        'Topic :: System :: Filesystems',
    ],
    python_requires='>=3.9',
    # Every adapter is imported with the package
    install_requires=S3_REQUIRES + GCS_REQUIRES + AZURE_REQUIRES,
    extras_require={
        's3': S3_REQUIRES,
        'gcs': GCS_REQUIRES,
        'azure': AZURE_REQUIRES,
        'all': S3_REQUIRES + GCS_REQUIRES + AZURE_REQUIRES,
        'dev': [
            'pytest>=7.0.0',
            'pytest-cov>=4.0.0',
            'pytest-mock>=3.10.0',
        ],
    },
    package_data={
        'unibucket': ['py.typed'],
    },
    zip_safe=False,
    keywords='storage cloud s3 gcs azure blob filesystem bucket adapter',
)
