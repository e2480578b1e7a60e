"""
Unit tests for gimbal plot generation.
"""

import os
import tempfile
import unittest

from smrt_gimbal.config import create_test_config
from smrt_gimbal.main import GimbalLog, constant_demand, run_simulation
from smrt_gimbal.plotting import extract_log_data, generate_all_plots
from smrt_gimbal.types import ControlDemand
from smrt_gimbal.vehicle import create_default_vehicle


class TestPlotGeneration(unittest.TestCase):
    """Test suite for plot generation functionality."""

    def setUp(self):
        vehicle = create_default_vehicle()
        _, self.log, _ = run_simulation(
            vehicle, create_test_config(),
            schedule=constant_demand(ControlDemand(pitch=0.7, yaw=0.2)),
            n_ticks=30, commands={20: 'lock'})
        self.temp_dir = tempfile.mkdtemp()

    def test_extract_log_data(self):
        data = extract_log_data(self.log)
        self.assertEqual(len(data.tick), 30)
        self.assertEqual(int(data.locked.sum()), 10)
        self.assertEqual(data.deflection_deg.shape, (30,))

    def test_generate_all_plots_writes_files(self):
        paths = generate_all_plots(self.log, 5.0, self.temp_dir)
        self.assertEqual(len(paths), 2)
        for path in paths:
            self.assertTrue(os.path.isfile(path))
            self.assertGreater(os.path.getsize(path), 0)

    def test_generate_plots_creates_directory(self):
        out_dir = os.path.join(self.temp_dir, 'nested', 'plots')
        generate_all_plots(self.log, 5.0, out_dir)
        self.assertTrue(os.path.isdir(out_dir))

    def test_empty_log(self):
        paths = generate_all_plots(GimbalLog(), 5.0, self.temp_dir)
        self.assertEqual(len(paths), 2)


if __name__ == '__main__':
    unittest.main()
