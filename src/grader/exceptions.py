# src/grader/exceptions.py


class ConfigurationError(Exception):
    """
    Fatal problem with the grader's inputs (missing HTML or checks file,
    malformed checks JSON). The command line reports the message and exits 1.
    """
