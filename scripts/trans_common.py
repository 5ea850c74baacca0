import os
import logging

from argparse import ArgumentParser, Namespace
from dataclasses import dataclass

from PyResxTrans.Helpers.Resources import config_dir
from PyResxTrans import Options as options_module
from PyResxTrans.Options import Options
from PyResxTrans.ResourceError import MissingInputFileError, ProviderError, ResourceParseError
from PyResxTrans.ResourceProject import LanguageResult, ResourceProject
from PyResxTrans.TranslationClient import TranslationClient
from PyResxTrans.TranslationProvider import TranslationProvider

@dataclass
class LoggerOptions():
    file_handler: logging.FileHandler|None
    log_path: str

def InitLogger(logfilename: str, debug: bool = False) -> LoggerOptions:
    """ Initialise the logger with a file handler and return the path to the log file """
    log_path = os.path.join(config_dir, f"{logfilename}.log")
    file_handler = None

    if debug:
        logging_level = logging.DEBUG
    else:
        level_name = os.getenv('LOG_LEVEL', 'INFO').upper()
        logging_level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(format='%(levelname)s: %(message)s', encoding='utf-8', level=logging_level)
    logging.info("Starting resource translation")
    logging.info(f"Current directory: {os.getcwd()}")

    if debug:
        logging.debug("Debug logging enabled")

    # Create file handler with the same logging level
    try:
        os.makedirs(config_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding='utf-8', mode='w')
        file_handler.setLevel(logging_level)
        file_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        logging.getLogger('').addHandler(file_handler)
    except OSError as e:
        logging.warning(f"Unable to create log file at {log_path}: {e}")

    return LoggerOptions(file_handler=file_handler, log_path=log_path)

def CreateArgParser(description : str) -> ArgumentParser:
    """
    Create the argument parser for the command line tools
    """
    parser = ArgumentParser(description=description)
    parser.add_argument('input', help="Path to the resource file to translate")
    parser.add_argument('languages', help="Comma separated list of language codes to translate into, e.g. es,zh-CN")
    parser.add_argument('format', nargs='?', default=None, help="Format of the input file (resx or json). Detected from the file extension if not specified")
    parser.add_argument('-p', '--provider', type=str, default=None, help="Translation provider to use (Google Translate or LibreTranslate)")
    parser.add_argument('-s', '--server', type=str, default=None, help="Address of the LibreTranslate server (e.g. http://localhost:5000)")
    parser.add_argument('-k', '--apikey', type=str, default=None, help="API Key for the server (if required)")
    parser.add_argument('--nativelanguage', type=str, default=None, help="Language code of the source strings, which are copied without translation")
    parser.add_argument('--includeblank', action='store_true', default=None, help="Include resources with empty values")
    parser.add_argument('--ratelimit', type=float, default=None, help="Maximum number of translation requests per minute")
    parser.add_argument('--maxretries', type=int, default=None, help="Number of times to retry a failed request")
    parser.add_argument('--debug', action='store_true', help="Run with DEBUG log level")
    return parser

def CreateOptions(args: Namespace, **kwargs) -> Options:
    """
    Create options from the saved settings, overridden by any command line arguments
    """
    options = Options()
    if options.LoadSettings():
        logging.info(f"Loaded settings from {options_module.settings_path}")

    provider = args.provider or ("LibreTranslate" if args.server else None)

    options.update({
        'provider': provider,
        'native_language': args.nativelanguage,
        'input_format': args.format,
        'include_blank_resources': args.includeblank,
        'rate_limit': args.ratelimit,
        'max_retries': args.maxretries,
    })
    options.update(kwargs)

    if options.provider == "LibreTranslate":
        options.UpdateProviderSettings(options.provider, {
            'server_address': args.server,
            'api_key': args.apikey,
        })

    return options

def CreateTranslationClient(options : Options) -> TranslationClient:
    """
    Initialise a translation client for the provider selected in the options
    """
    translation_provider : TranslationProvider = TranslationProvider.get_provider(options)

    if not translation_provider.ValidateSettings():
        logging.error(f"Provider settings are not valid: {translation_provider.validation_message}")
        raise ProviderError(f"Invalid settings for provider {options.provider}", translation_provider)

    logging.info(f"Using translation provider {translation_provider.name}")

    return translation_provider.GetTranslationClient(options.GetClientSettings())

def CreateProject(options : Options, args : Namespace) -> ResourceProject|None:
    """
    Load the source file, or report why it could not be loaded
    """
    project = ResourceProject(options)

    try:
        project.LoadSource(args.input, args.format)

    except MissingInputFileError as e:
        logging.error(str(e))
        return None

    except ResourceParseError as e:
        logging.warning(f"Could not parse {args.input}")
        logging.warning(f"         {e}")
        return None

    return project

def TranslateResources(description : str, logfilename : str) -> list[LanguageResult]:
    """
    Parse the command line and translate the input file into each requested language
    """
    parser = CreateArgParser(description)
    args = parser.parse_args()

    InitLogger(logfilename, args.debug)

    options = CreateOptions(args)
    logging.info(f"resx-trans {options.version}")

    project = CreateProject(options, args)
    if not project:
        return []

    client = CreateTranslationClient(options)

    try:
        results = project.TranslateLanguages(args.languages, client)

    finally:
        client.Close()

    for result in results:
        if result.succeeded:
            logging.info(f"{result.language}: {result.outputpath} ({result.translated_count} translated, {result.reused_count} reused)")
        else:
            logging.error(f"{result.language}: failed, {result.error}")

    logging.info("Done.")
    return results
