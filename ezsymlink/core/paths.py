APP_NAME = "ezsymlink"
APP_AUTHOR = "ezsymlink"
LOG_FILENAME = "ezsymlink.log"
