from importlib.metadata import version
import molstream


def test_version():
    """
    Check if the version of the package is equal to the version of the
    installed distribution.
    """
    assert molstream.__version__ == version("molstream")
