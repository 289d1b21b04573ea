# -----------------------------------------------------------------------------
# es7s/hexthing [Binary to hex/ASCII dump converter and back]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from . import App


def main():
    App().run()


if __name__ == '__main__':
    main()
