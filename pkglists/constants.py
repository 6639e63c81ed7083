from pathlib import Path

CONFIG_DIR = Path.home() / '.config' / 'pkglists'
CONFIG_FILE = CONFIG_DIR / 'config.yaml'

PRIMARY_LIST = Path('packages') / 'pacman-packages.txt'
SECONDARY_LIST = Path('packages') / 'paru-packages.txt'
LOG_FILE = Path('install-packages.log')

SUPPORTED_HELPERS = ['paru', 'yay']
DEFAULT_AUR_HELPER = 'paru'
AUR_URL = 'https://aur.archlinux.org'

TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M:%S'
