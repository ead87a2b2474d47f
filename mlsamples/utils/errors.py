# mlsamples/utils/errors.py
class UserInputError(RuntimeError):
    """
    Raised for invalid user-provided config (paths, trainer keys, etc).
    Should NOT print traceback.
    """


class SchemaError(ValueError):
    """
    A data file does not provide every column its record type declares.
    """


class ModelArtifactError(RuntimeError):
    """
    An artifact directory is missing or incomplete.
    """
