from importlib.metadata import PackageNotFoundError, version

try:
    version = version("SExpFormat")
except PackageNotFoundError:
    version = "0.0.0"
