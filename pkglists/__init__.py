"""Install Arch Linux pacman and AUR package lists."""

__version__ = '0.1.0'
