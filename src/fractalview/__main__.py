# -*- coding: utf-8 -*-
""" Launches the interactive viewer: python -m fractalview """
import fractalview as fv
import fractalview.gui


def main():
    fv.set_log_handlers()
    fv.gui.show()


if __name__ == "__main__":
    main()
