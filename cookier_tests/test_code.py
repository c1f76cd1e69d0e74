# This convenience testing module simply imports all the "code_tests".
# These are tests that can simply be run standalone in a development
# environment. They do not start a web server: the WSGI application is
# called directly with hand-made environments.

from cookier_tests.code_tests.test_config import *
from cookier_tests.code_tests.test_tokens import *
from cookier_tests.code_tests.test_cookiejar import *
from cookier_tests.code_tests.test_request_response import *
from cookier_tests.code_tests.test_manager import *
from cookier_tests.code_tests.test_provider import *
from cookier_tests.code_tests.test_wsgiapp import *
from cookier_tests.code_tests.test_inspect_cookies import *
from cookier_tests.code_tests.test_logger import *
