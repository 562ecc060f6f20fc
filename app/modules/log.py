import logging

FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def get_logger(filename=None, level=logging.INFO):
    root = logging.getLogger('')
    root.setLevel(level)

    if not root.handlers:
        # log to console
        console = logging.StreamHandler()
        console.setFormatter(logging.Formatter(FORMAT))
        root.addHandler(console)

    if filename is not None:
        # and to file as well, using the same format
        file_handler = logging.FileHandler(filename, mode='w')
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(FORMAT))
        root.addHandler(file_handler)

    return logging
