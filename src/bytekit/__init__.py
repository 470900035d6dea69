from .version import __version__ as __version__

__title__ = "bytekit"
__description__ = "Base64 codec and RC4 stream cipher primitives for raw byte buffers."
__license__ = "Apache-2.0"
