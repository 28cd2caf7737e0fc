"""File and hex helpers used by the command line front end."""


class FileAccessError(Exception):

    def __init__(self, path, message):
        super(FileAccessError, self).__init__(message)
        self.path = path
        self.message = message


def read_file_bytes(path):
    """Return the raw contents of the file at path.

    Raises:
        FileAccessError: The file could not be opened or read.
    """
    try:
        with open(path, 'rb') as f:
            return f.read()
    except OSError as error:
        raise FileAccessError(path, 'Unable to open file: {}'.format(path)) from error


def write_file(path, contents):
    """Write the string contents to path verbatim, replacing any existing file.

    Raises:
        FileAccessError: The file could not be opened or written.
    """
    try:
        with open(path, 'w', encoding='utf-8', newline='') as f:
            f.write(contents)
    except OSError as error:
        raise FileAccessError(path, 'Unable to open file: {}'.format(path)) from error


def to_hex_string(data):
    """Render bytes as two lowercase hex digits per byte, no separators."""
    return bytes(data).hex()
