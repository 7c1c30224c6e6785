import io
import pathlib
from functools import wraps

from _sexpformat.prettifier import Prettifier


def takes_stream(i, mode):
    """
    Decorator for functions taking a text stream as the i'th argument,
    which lets them be given a path instead. The file is then opened with
    the given mode and closed when the function returns.
    """

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            if (
                len(args) > i
                and args[i] is not None
                and isinstance(args[i], (str, pathlib.Path))
            ):
                with open(args[i], mode, encoding="utf8", newline="") as f:
                    return func(*args[:i], f, *args[i + 1 :], **kwargs)
            else:
                return func(*args, **kwargs)

        return wrapper

    return decorator


@takes_stream(0, "r")
@takes_stream(1, "w")
def prettify(source, destination, config=None):
    """
    Reformats S-expressions read from source and writes them to destination.

    :param source: A file-like object, (string to path, pathlib.Path or
        opened text stream).
    :param destination: A file-like object, (string to path, pathlib.Path or
        opened text stream).
    :param config: The Config to format with, defaults to Config().
    """
    prettifier = Prettifier(config)
    write = destination.write
    while True:
        chunk = source.read(io.DEFAULT_BUFFER_SIZE)
        if not chunk:
            break
        for char in chunk:
            prettifier.process(char, write)
    prettifier.finish(write)


def prettify_str(text, config=None):
    """
    Reformats the S-expressions in the given string.

    >>> prettify_str('(net  1\\n   "GND")')
    '(net 1 "GND")\\n'
    """
    destination = io.StringIO()
    prettify(io.StringIO(text), destination, config)
    return destination.getvalue()
