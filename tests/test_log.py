# -*- coding: utf-8 -*-
import os
import logging
import shutil
import unittest

import fractalview as fv
import test_config


class Test_settings(test_config.Settings_mixin, unittest.TestCase):

    def test_frame_size(self):
        fv.settings.scale = 3
        self.assertEqual(fv.settings.frame_size(), (960, 600))
        fv.settings.scale = 8
        self.assertEqual(fv.settings.frame_size(), (2560, 1600))
        fv.settings.scale = 0
        with self.assertRaises(ValueError):
            fv.settings.frame_size()

    def test_mkdir_p(self):
        path = os.path.join(test_config.temporary_data_dir, "_mkdir", "a")
        fv.utils.mkdir_p(path)
        fv.utils.mkdir_p(path)
        self.assertTrue(os.path.isdir(path))


class Test_log_handlers(test_config.Settings_mixin, unittest.TestCase):

    def setUp(self):
        super().setUp()
        self.log_dir = os.path.join(test_config.temporary_data_dir, "_log")
        shutil.rmtree(self.log_dir, ignore_errors=True)

    def tearDown(self):
        logger = logging.getLogger("fractalview")
        for handler in logger.handlers[:]:
            handler.close()
            logger.removeHandler(handler)
        super().tearDown()

    @test_config.no_stdout
    def test_console_levels(self):
        for verbosity, level in [
            ("warn @ console", logging.WARNING),
            ("warn + info @ console", logging.INFO),
            (0, logging.WARNING),
            (1, logging.INFO),
        ]:
            with self.subTest(verbosity=verbosity):
                logger = fv.set_log_handlers(verbosity)
                self.assertEqual(logger.level, level)
                self.assertEqual(len(logger.handlers), 1)

    @test_config.no_stdout
    def test_default_verbosity(self):
        fv.settings.verbosity = 0
        logger = fv.set_log_handlers()
        self.assertEqual(logger.level, logging.WARNING)

    @test_config.no_stdout
    def test_file_logger(self):
        fv.settings.log_directory = self.log_dir
        logger = fv.set_log_handlers("debug @ console + log")
        self.assertEqual(logger.level, logging.DEBUG)
        self.assertEqual(len(logger.handlers), 2)
        logging.getLogger("fractalview.controller").debug("debug message")
        for handler in logger.handlers:
            handler.flush()
        log_files = os.listdir(self.log_dir)
        self.assertEqual(len(log_files), 1)
        with open(os.path.join(self.log_dir, log_files[0])) as f:
            self.assertIn("debug message", f.read())

    @test_config.no_stdout
    def test_no_log_directory(self):
        fv.settings.log_directory = None
        logger = fv.set_log_handlers("debug2 @ console + log")
        self.assertEqual(len(logger.handlers), 1)

    def test_unknown_verbosity(self):
        with self.assertRaises(ValueError):
            fv.set_log_handlers("everything")
        with self.assertRaises(ValueError):
            fv.set_log_handlers(4)


if __name__ == "__main__":
    runner = unittest.TextTestRunner(verbosity=2)
    runner.run(test_config.suite([Test_settings, Test_log_handlers]))
