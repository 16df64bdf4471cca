class InvalidOptionsFile(Exception):
    """ Raised when an options file does not contain a mapping of options """
    pass
