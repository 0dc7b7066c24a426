# -*- coding: utf-8 -*-
import logging
import os
import shutil
import unittest

import fractalpaint as fp
import test_config


class Test_log(unittest.TestCase):

    def setUp(self):
        self._log_directory = fp.settings.log_directory
        self.log_dir = os.path.join(test_config.temporary_data_dir,
                                    "_log_dir")

    def tearDown(self):
        logger = logging.getLogger("fractalpaint")
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(logging.NOTSET)
        fp.settings.log_directory = self._log_directory
        shutil.rmtree(self.log_dir, ignore_errors=True)

    @test_config.no_stdout
    def test_verbosity_levels(self):
        for verbosity, level in [
                ("warn @ console", logging.WARNING),
                ("warn + info @ console", logging.INFO),
                (0, logging.WARNING),
                (1, logging.INFO),
        ]:
            with self.subTest(verbosity=verbosity):
                logger = fp.set_log_handlers(verbosity)
                self.assertEqual(logger.name, "fractalpaint")
                self.assertEqual(logger.level, level)
                # Previous handlers are replaced
                self.assertEqual(len(logger.handlers), 1)

    @test_config.no_stdout
    def test_file_handler(self):
        fp.settings.log_directory = self.log_dir
        logger = fp.set_log_handlers("debug @ console + log")
        self.assertEqual(logger.level, logging.DEBUG)
        file_handlers = [h for h in logger.handlers
                         if isinstance(h, logging.FileHandler)]
        self.assertEqual(len(file_handlers), 1)

        driver = fp.Render_driver(test_config.Recording_surface(30, 18))
        driver.start("Henon")
        for _ in range(3):
            driver.next_step()
        driver.cancel()
        driver.next_step()
        file_handlers[0].flush()

        log_files = os.listdir(self.log_dir)
        self.assertEqual(len(log_files), 1)
        self.assertTrue(log_files[0].endswith("_fractalpaint.log"))
        with open(os.path.join(self.log_dir, log_files[0])) as f:
            content = f.read()
        self.assertIn("Starting run: Henon", content)
        self.assertIn("Interruption signal received", content)
        self.assertIn("cancelled after 3", content)

    @test_config.no_stdout
    def test_handler_levels(self):
        """ Console stream and file level for each verbosity """
        fp.settings.log_directory = self.log_dir
        logger = fp.set_log_handlers("warn @ console")
        (ch,) = logger.handlers
        self.assertEqual(ch.level, logging.WARNING)

        for verbosity, file_level in [(2, logging.DEBUG),
                                      (3, logging.NOTSET)]:
            with self.subTest(verbosity=verbosity):
                logger = fp.set_log_handlers(verbosity)
                ch, fh = logger.handlers
                self.assertNotIsInstance(ch, logging.FileHandler)
                self.assertEqual(ch.level, logging.INFO)
                self.assertIsInstance(fh, logging.FileHandler)
                self.assertEqual(fh.level, file_level)
                self.assertEqual(logger.level, logging.DEBUG)

    @test_config.no_stdout
    def test_no_log_directory(self):
        """ Without a log directory only the console handler is set """
        fp.settings.log_directory = None
        logger = fp.set_log_handlers(2)
        self.assertEqual(len(logger.handlers), 1)
        self.assertFalse(os.path.exists(self.log_dir))

    def test_invalid(self):
        for verbosity in ("loud", 4, -1, 1.5, None):
            with self.subTest(verbosity=verbosity):
                with self.assertRaises(ValueError):
                    fp.set_log_handlers(verbosity)


if __name__ == "__main__":
    runner = unittest.TextTestRunner(verbosity=2)
    runner.run(test_config.suite([Test_log]))
