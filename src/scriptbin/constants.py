PACKAGE_NAME = "scriptbin"
APP_NAME = "scripts"
ENV_PREFIX = "SCRIPTS_"
