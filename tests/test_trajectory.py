# -*- coding: utf-8 -*-
import math
import unittest

import fractalpaint as fp
import fractalpaint.models as fpm
import fractalpaint.models.trajectory as fpt
import test_config


class Test_trajectory(unittest.TestCase):

    def test_henon_one_step(self):
        """ a=1.4, b=0.3 from (0.1, 0.1) """
        x, y = fpm.step((0.1, 0.1), "Henon", a=1.4, b=0.3)
        self.assertAlmostEqual(x, 1.086, places=12)
        self.assertAlmostEqual(y, 0.03, places=12)

    def test_lorenz_one_step(self):
        state = fpm.initial_state(fp.Algorithm_kind.LORENZ_XY)
        self.assertEqual(state, (0.1, 0., 0.))
        x, y, z = fpm.step(state, fp.Algorithm_kind.LORENZ_XY)
        self.assertAlmostEqual(x, 0.09, places=12)
        self.assertAlmostEqual(y, 0.028, places=12)
        self.assertEqual(z, 0.)

    def test_lorenz_projections_share_system(self):
        """ The 3 projections iterate exactly the same recurrence """
        kinds = (fp.Algorithm_kind.LORENZ_XY, fp.Algorithm_kind.LORENZ_YZ,
                 fp.Algorithm_kind.LORENZ_XZ)
        states = {kind: fpm.initial_state(kind) for kind in kinds}
        for _ in range(500):
            states = {kind: fpm.step(s, kind) for kind, s in states.items()}
        self.assertEqual(len(set(states.values())), 1)

    def test_lorenz_ignores_parameters(self):
        state = fpt.LORENZ_INITIAL_STATE
        kind = fp.Algorithm_kind.LORENZ_YZ
        self.assertEqual(fpm.step(state, kind),
                         fpm.step(state, kind, a=1.4, b=0.3))

    def test_reproducible(self):
        """ n steps from the initial state are bit-for-bit reproducible """
        for (kind, a, b) in [
                (fp.Algorithm_kind.HENON, 1.4, 0.3),
                (fp.Algorithm_kind.HENON, -0.5, -0.99998),
                (fp.Algorithm_kind.LORENZ_XZ, None, None),
        ]:
            with self.subTest(kind=kind):
                runs = []
                for _ in range(2):
                    state = fpm.initial_state(kind)
                    orbit = []
                    for _ in range(2000):
                        state = fpm.step(state, kind, a=a, b=b)
                        orbit += [state]
                    runs += [orbit]
                self.assertEqual(runs[0], runs[1])

    def test_henon_attractor_bounded(self):
        """ The classical Henon attractor stays in the viewport """
        vp = fp.viewport.henon_viewport(1000, 600)
        state = fpt.HENON_INITIAL_STATE
        for _ in range(5000):
            state = fpm.step(state, "Henon", a=1.4, b=0.3)
            self.assertTrue(vp.contains(*vp.to_pixel(*state)))

    def test_lorenz_attractor_bounded(self):
        """ xy projection stays on the surface. z exceeds 50 at times, the
        few yz and xz points above the top edge are off-surface """
        vp = fp.viewport.lorenz_viewport(1000, 600)
        x, y, z = fpt.LORENZ_INITIAL_STATE
        n_steps = 20000
        off_surface = {"xy": 0, "yz": 0, "xz": 0}
        z_max = 0.
        for _ in range(n_steps):
            x, y, z = fpm.step((x, y, z), "LorenzXY")
            z_max = max(z, z_max)
            for name, pair in (("xy", (x, y)), ("yz", (y, z)), ("xz", (x, z))):
                screen_x, screen_y = vp.to_pixel(*pair)
                if not vp.contains(screen_x, screen_y):
                    off_surface[name] += 1
                    # Only the top edge is crossed
                    self.assertTrue(0 <= screen_x < 1000)
                    self.assertLess(screen_y, 0)
        self.assertEqual(off_surface["xy"], 0)
        self.assertGreater(z_max, 50.)
        self.assertLess(z_max, 60.)
        self.assertEqual(off_surface["yz"], off_surface["xz"])
        self.assertGreater(off_surface["yz"], 0)
        self.assertLess(off_surface["yz"], n_steps // 100)

    @test_config.no_stdout
    def test_lorenz_clipped(self):
        """ Off-surface points are clipped and counted by the surface """
        max_steps = fp.settings.lorenz_yz_max_steps
        fp.settings.lorenz_yz_max_steps = 5000
        try:
            surface = fp.Pixel_surface(1000, 600)
            run_state = fp.Render_driver(surface).run("LorenzYZ")
        finally:
            fp.settings.lorenz_yz_max_steps = max_steps
        self.assertEqual(run_state.status, fp.Run_status.COMPLETED)
        self.assertEqual(run_state.progress, 5000)

        vp = fp.viewport.lorenz_viewport(1000, 600)
        state = fpt.LORENZ_INITIAL_STATE
        expected = 0
        for _ in range(5000):
            state = fpm.step(state, "LorenzYZ")
            if not vp.contains(*vp.to_pixel(state[1], state[2])):
                expected += 1
        self.assertGreater(expected, 0)
        self.assertEqual(surface.clipped, expected)

    def test_henon_diverging(self):
        """ A diverging orbit goes non-finite without raising """
        state = fpt.HENON_INITIAL_STATE
        for _ in range(200):
            state = fpm.step(state, "Henon", a=5., b=3.)
        self.assertFalse(all(math.isfinite(v) for v in state))

    def test_invalid(self):
        with self.assertRaises(ValueError):
            fpm.step((0.1, 0.1), "Henon")
        with self.assertRaises(ValueError):
            fpm.step((0.1, 0.1), "Mandelbrot", a=0., b=0.)
        with self.assertRaises(ValueError):
            fpm.initial_state("Julia")


if __name__ == "__main__":
    runner = unittest.TextTestRunner(verbosity=2)
    runner.run(test_config.suite([Test_trajectory]))
