import json
import os
import tempfile
import unittest
from unittest import mock

from checkers_core.cli.config import CLIConfig, get_config, set_config


class TestCLIConfig(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        env = {k: v for k, v in os.environ.items() if not k.startswith('CHECKERS_')}
        self._env = mock.patch.dict(os.environ, env, clear=True)
        self._env.start()

    def tearDown(self):
        self._env.stop()
        self.tmp.cleanup()
        set_config(None)

    def _write(self, name, content):
        path = os.path.join(self.tmp.name, name)
        with open(path, 'w') as f:
            f.write(content)
        return path

    def test_defaults(self):
        config = CLIConfig(config_file=os.path.join(self.tmp.name, 'missing.json'))
        self.assertEqual(config.get('output_format'), 'text')
        self.assertEqual(config.get('max_moves'), 200)
        self.assertEqual(config.get('simulation_games'), 10)
        self.assertIsNone(config.get('seed'))
        self.assertTrue(config.get('color_output'))

    def test_file_values_override_defaults(self):
        path = self._write('checkers.json', json.dumps({'max_moves': 50, 'output_format': 'json'}))
        config = CLIConfig(config_file=path)
        self.assertEqual(config.get('max_moves'), 50)
        self.assertEqual(config.get('output_format'), 'json')
        self.assertEqual(config.config_file, path)

    def test_environment_overrides_file(self):
        path = self._write('checkers.json', json.dumps({'max_moves': 50}))
        os.environ['CHECKERS_MAX_MOVES'] = '75'
        os.environ['CHECKERS_COLOR'] = 'no'
        os.environ['CHECKERS_SEED'] = '9'
        config = CLIConfig(config_file=path)
        self.assertEqual(config.get('max_moves'), 75)
        self.assertFalse(config.get('color_output'))
        self.assertEqual(config.get('seed'), 9)

    def test_bad_integer_in_environment(self):
        os.environ['CHECKERS_SIMULATION_GAMES'] = 'many'
        with self.assertLogs('checkers_core.cli.config', level='WARNING'):
            config = CLIConfig(config_file=os.path.join(self.tmp.name, 'missing.json'))
        self.assertEqual(config.get('simulation_games'), 10)

    def test_invalid_file_is_ignored(self):
        path = self._write('broken.json', '{not json')
        with self.assertLogs('checkers_core.cli.config', level='WARNING'):
            config = CLIConfig(config_file=path)
        self.assertEqual(config.get('max_moves'), 200)

        path = self._write('list.json', '[1, 2]')
        with self.assertLogs('checkers_core.cli.config', level='WARNING'):
            CLIConfig(config_file=path)

    def test_save_and_reload(self):
        config = CLIConfig(config_file=os.path.join(self.tmp.name, 'saved.json'))
        config.update({'max_moves': 120, 'quiet': True})
        config.save()
        reloaded = CLIConfig(config_file=config.config_file)
        self.assertEqual(reloaded.get('max_moves'), 120)
        self.assertTrue(reloaded.get('quiet'))
        self.assertEqual(reloaded.to_dict(), config.to_dict())

    def test_global_instance(self):
        custom = CLIConfig(config_file=os.path.join(self.tmp.name, 'missing.json'))
        set_config(custom)
        self.assertIs(get_config(), custom)


if __name__ == '__main__':
    unittest.main()
