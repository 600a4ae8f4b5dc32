import logging

__all__ = ["get_logger"]

# We're a library: leave handler and level choices to the application, but
# make sure nothing gets printed through the "last resort" handler if the
# application never configures logging.
logger = logging.getLogger("hyperplug")
logger.addHandler(logging.NullHandler())


def get_logger(name=None):
    if name:
        return logging.getLogger("hyperplug.{}".format(name))
    return logger
