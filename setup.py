import setuptools

setuptools.setup(
	name='filterlex',
	version='0.1.0',
	packages=[
		'filterlex',
		'filterlex.lexical',
		'filterlex.scanning',
		'filterlex.support',
	],
	description='Scanners for the tokens of a packet-filter expression language',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	python_requires='>=3.9',
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Topic :: Software Development :: Compilers",
		"Development Status :: 3 - Alpha",
	],
)
