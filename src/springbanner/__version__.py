__version__ = "0.3.0"
__author__ = "Frank1o3"
