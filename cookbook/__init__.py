"""Small command-line tools and helpers: text, counting, conversions, compression, fetching, web servers, images and deep equality."""

__version__ = "0.1.0"