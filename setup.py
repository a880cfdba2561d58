import setuptools

setuptools.setup(
	name='charclass-tools',
	version='0.1.0',
	packages=[
		'charclass',
		'charclass.support',
	],
	python_requires='>=3.9',
	description='Character classes as compact, canonical sets of code point ranges',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Topic :: Software Development :: Compilers",
		"Development Status :: 3 - Alpha",
    ],
)
