APP_NAME = "tshack"
VERSION = "0.1.1"
ENV_PREFIX = "TSHACK_"
PREFERENCES_ENV_PREFIX = "TSHACK_PREFS"

PROJECTS_DIR_NAME = "projects"
SCRIPTS_DIR_NAME = "scripts"
SCRIPT_SUFFIX = ".ts"
DEFAULT_SCRIPT_CONTENT = "// Your TypeScript code here"

DEFAULT_TEMPLATE = "basic"
PACKAGE_MANAGER_CHOICES = ("npm", "pnpm", "yarn", "bun")
