"""
This is the cookier logging module
It is used by the scripts and the development server to configure the
python logger. Library code takes a logger argument instead of importing it.
"""

import os
import sys

import logging
import logging.handlers

from cookier.config import get_config
cc = get_config()

# Create a Logger
logger = logging.getLogger()

# This is where we set what level messages we want to log.
# Default to INFO and be setable to debug with a command line argument
logger.setLevel(logging.INFO)

# Create log formatter
formatter = logging.Formatter("%(asctime)s %(process)d:%(module)s:%(lineno)d "
                              "%(levelname)s: %(message)s")


def _logfile(suffix=None):
    name = os.path.basename(sys.argv[0]) or 'cookier'
    if suffix:
        name = "%s-%s" % (name, suffix)
    return os.path.join(cc.log_dir, "%s.log" % name)


# Create log message handlers. The file handler is only attached when a
# log_dir is configured, and delay=True keeps it from creating the file
# before then.
filehandler = logging.handlers.RotatingFileHandler(_logfile(), backupCount=10,
                                                   maxBytes=10000000,
                                                   delay=True)
streamhandler = logging.StreamHandler()
emailsubject = "Messages from cookier on %s" % os.uname()[1]
smtphandler = logging.handlers.SMTPHandler(mailhost=cc.smtp_server,
                                           fromaddr='cookier@%s' % os.uname()[1],
                                           toaddrs=[cc.email_errors_to],
                                           subject=emailsubject)

# The smtp handler should only do CRITICAL or worse
smtphandler.setLevel(logging.CRITICAL)

# Add formatter to handlers
filehandler.setFormatter(formatter)
streamhandler.setFormatter(formatter)
smtphandler.setFormatter(formatter)

# Add Handlers to logger
if cc.log_dir != '':
    logger.addHandler(filehandler)


# Utility functions follow

# env var setting for the webserver
loglevels = {"DEBUG": logging.DEBUG, "INFO": logging.INFO,
             "WARNING": logging.WARN}
loglevel = os.getenv("LOG_LEVEL", None)
if loglevel is not None:
    if loglevel in loglevels:
        logger.setLevel(loglevels[loglevel])


def setdebug(want):
    """ Set if we want debug messages """
    if want:
        logger.setLevel(logging.DEBUG)


def setdemon(want):
    """
    If running as a demon, don't output to stdout but do activate email
    handler
    """
    if want:
        if cc.email_errors_to != '':
            logger.addHandler(smtphandler)
    elif streamhandler not in logger.handlers:
        logger.addHandler(streamhandler)


def setlogfilesuffix(suffix):
    """ Set a suffix on the log file name """
    global filehandler
    new_filehandler = logging.handlers.RotatingFileHandler(_logfile(suffix),
                                                           backupCount=10,
                                                           maxBytes=10000000,
                                                           delay=True)
    new_filehandler.setFormatter(formatter)
    logger.removeHandler(filehandler)
    filehandler = new_filehandler
    if cc.log_dir != '':
        logger.addHandler(filehandler)
