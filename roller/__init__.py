from importlib.metadata import PackageNotFoundError, version


def _package_version() -> str:
    try:
        return version("dashroll")
    except PackageNotFoundError:
        # Running from a source checkout, or otherwise not installed.
        return "0.0.0"


__version__ = _package_version()

__all__ = ["__version__"]
