from importlib.metadata import PackageNotFoundError, version

try:
    version = version("CaratIO")
except PackageNotFoundError:
    version = "0.0.0"
