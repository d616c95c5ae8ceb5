from setuptools import setup, find_packages
setup(
    name='firebase-authentication',
    version='0.1.0',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    include_package_data=True,
    package_data={
        'firebase_authentication': [
            'settings_manifest.yaml',
        ],
    },
    description='Firebase ID token verification and Identity Toolkit REST client.',
    author='Your Name',
    author_email='youremail@example.com',
    python_requires='>=3.8',
    install_requires=[
        'invoke>=2.0.0',
        'pyyaml>=6.0',
        'PyJWT[crypto]>=2.4.0',
        'cryptography>=3.4',
        'requests>=2.25.0',
        'pydantic>=2.0.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
        ],
    },
)
