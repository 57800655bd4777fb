APP_NAME = "loadconf"

CONFIG_SUBDIR = ".config"
CONFIG_BASENAME = "config"
