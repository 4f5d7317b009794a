# -*- coding: utf-8 -*-
import unittest

import numpy as np

import fractalview as fv
import test_config

W, H = 24, 16
FPS = 1000


class Test_run_loop(unittest.TestCase):

    @test_config.no_stdout
    def test_generate_on_demand(self):
        host = test_config.Scripted_host(
            [{}, {"pressed": [fv.Key.regenerate]}, {}], W, H
        )
        controller = fv.View_controller(W, H)
        ticks = fv.run_loop(host, controller, fps=FPS)

        self.assertEqual(ticks, 3)
        self.assertEqual(len(host.frames), 3)
        # Nothing is drawn before the first event
        self.assertTrue(np.all(host.frames[0] == 0))
        expected = fv.new_buffer(W, H)
        fv.regenerate(expected, W, H, controller.view)
        np.testing.assert_array_equal(host.frames[1], expected)
        # Frame kept as is without event
        np.testing.assert_array_equal(host.frames[2], host.frames[1])

    @test_config.no_stdout
    def test_escape(self):
        host = test_config.Scripted_host(
            [{}, {"down": [fv.Key.escape]}, {}], W, H
        )
        ticks = fv.run_loop(host, fv.View_controller(W, H), fps=FPS)
        self.assertEqual(ticks, 1)

    @test_config.no_stdout
    def test_closed(self):
        host = test_config.Scripted_host([], W, H)
        ticks = fv.run_loop(host, fv.View_controller(W, H), fps=FPS)
        self.assertEqual(ticks, 0)

    @test_config.no_stdout
    def test_presentation_failure(self):
        """ A presentation failure propagates out of the loop """
        host = test_config.Scripted_host([{}, {}], W + 1, H)
        with self.assertRaises(fv.Display_error):
            fv.run_loop(host, fv.View_controller(W, H), fps=FPS)

    def test_invalid_fps(self):
        host = test_config.Scripted_host([{}], W, H)
        with self.assertRaises(ValueError):
            fv.run_loop(host, fv.View_controller(W, H), fps=0)

    def test_abstract_host(self):
        host = fv.Display_host()
        with self.assertRaises(NotImplementedError):
            host.is_open()
        with self.assertRaises(NotImplementedError):
            host.update_with_buffer(fv.new_buffer(W, H), W, H)


class Test_buffer(unittest.TestCase):

    def test_new_buffer(self):
        buffer = fv.new_buffer(W, H)
        self.assertEqual(buffer.shape, (W * H,))
        self.assertEqual(buffer.dtype, np.uint32)
        self.assertTrue(np.all(buffer == 0))
        with self.assertRaises(ValueError):
            fv.new_buffer(0, H)

    def test_regenerate_pixels(self):
        """ Every pixel is the color of its mapped point """
        view = fv.View_state(center=(-0.5, 0.1), zoom=3., detail=64)
        buffer = fv.new_buffer(W, H)
        fv.regenerate(buffer, W, H, view)
        s = fv.settings
        for p in range(W * H):
            re, im = fv.pixel_to_complex(p, W, H, -0.5, 0.1, 3.)
            expected = fv.mandelbrot_color(
                re, im, 64, s.escape_radius_sq, s.color_scale, s.inset_color
            )
            self.assertEqual(buffer[p], expected)
        # The view contains both in-set and escaping points
        self.assertIn(s.inset_color, buffer)
        self.assertTrue(np.any(buffer != s.inset_color))


if __name__ == "__main__":
    runner = unittest.TextTestRunner(verbosity=2)
    runner.run(test_config.suite([Test_run_loop, Test_buffer]))
