import logging
import os

from PyResxTrans.ResourceFileHandler import ResourceFileHandler
from PyResxTrans.Formats.JsonFileHandler import JsonFileHandler
from PyResxTrans.Formats.ResxFileHandler import ResxFileHandler

default_format = 'resx'

file_handlers : dict[str, type[ResourceFileHandler]] = {
    'resx': ResxFileHandler,
    'json': JsonFileHandler,
}

def GetFileHandler(filepath : str|None = None, format_name : str|None = None) -> ResourceFileHandler:
    """
    Get a handler for the requested format, or for the file's extension if no format is given.
    Falls back to resx if neither is recognised.
    """
    if format_name:
        handler_class = file_handlers.get(format_name.strip().lower())
        if handler_class:
            return handler_class()

        logging.warning(f"Unknown input format '{format_name}', detecting from file extension")

    if filepath:
        extension = os.path.splitext(filepath)[1].lower()
        for handler_class in file_handlers.values():
            handler = handler_class()
            if extension in handler.get_file_extensions():
                return handler

    return file_handlers[default_format]()
