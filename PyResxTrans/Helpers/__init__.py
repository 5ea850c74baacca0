import os

def GetOutputPath(filepath : str, language_code : str) -> str:
    """
    Path for the translation of a resource file, e.g. Strings.resx -> Strings.fr.resx
    """
    directory = os.path.dirname(filepath)
    basename, extension = os.path.splitext(os.path.basename(filepath))
    return os.path.join(directory, f"{basename}.{language_code}{extension}")
