import json
import unittest
import unittest.mock

from test_utils import completed, ignite_env

from ignite_cli.lib.errors import EXIT_PLUGIN_FAILED, PluginError, ToolError
from ignite_cli.lib.plugins import RESULT_MARKER, initialize_plugin, plugin_module_name


def _result(value) -> str:
    return f"installing things...\n{RESULT_MARKER}{json.dumps(value)}\n"


class PluginNameTests(unittest.TestCase):
    def test_prefix_is_added(self) -> None:
        with ignite_env():
            self.assertEqual(plugin_module_name("vector-icons"), "ignite-vector-icons")

    def test_prefix_is_always_added(self) -> None:
        with ignite_env():
            self.assertEqual(plugin_module_name("ignite-x"), "ignite-ignite-x")

    def test_prefix_from_config(self) -> None:
        with ignite_env("plugins:\n  prefix: acme-\n"):
            self.assertEqual(plugin_module_name("maps"), "acme-maps")


class InitializePluginTests(unittest.TestCase):
    @unittest.mock.patch("ignite_cli.lib.plugins.subprocess.run")
    def test_returns_new_mapping(self, mock_run: unittest.mock.Mock) -> None:
        new_config = {"generators": {"component": "generator-x"}}
        mock_run.return_value = completed(0, _result(new_config))
        with ignite_env() as env:
            result = initialize_plugin("ignite-x", env.cwd, {"generators": {}})
            self.assertEqual(result, new_config)

            cmd = mock_run.call_args[0][0]
            kwargs = mock_run.call_args[1]
            self.assertEqual(cmd[0], "node")
            self.assertEqual(cmd[1], "-e")
            self.assertEqual(cmd[3], str(env.cwd / "node_modules" / "ignite-x"))
            self.assertEqual(kwargs["cwd"], str(env.cwd))
        self.assertEqual(json.loads(kwargs["input"]), {"generators": {}})

    @unittest.mock.patch("ignite_cli.lib.plugins.subprocess.run")
    def test_undefined_result_leaves_config_alone(self, mock_run: unittest.mock.Mock) -> None:
        mock_run.return_value = completed(0, "plugin says hi\n")
        with ignite_env() as env:
            self.assertIsNone(initialize_plugin("ignite-x", env.cwd, {}))

    @unittest.mock.patch("ignite_cli.lib.plugins.subprocess.run")
    def test_null_result_leaves_config_alone(self, mock_run: unittest.mock.Mock) -> None:
        mock_run.return_value = completed(0, _result(None))
        with ignite_env() as env:
            self.assertIsNone(initialize_plugin("ignite-x", env.cwd, {}))

    @unittest.mock.patch("ignite_cli.lib.plugins.subprocess.run")
    def test_non_mapping_result_is_rejected(self, mock_run: unittest.mock.Mock) -> None:
        mock_run.return_value = completed(0, _result(["not", "a", "mapping"]))
        with ignite_env() as env:
            with self.assertRaises(PluginError) as ctx:
                initialize_plugin("ignite-x", env.cwd, {})
        self.assertEqual(ctx.exception.exit_code, EXIT_PLUGIN_FAILED)

    @unittest.mock.patch("ignite_cli.lib.plugins.subprocess.run")
    def test_invalid_json_is_rejected(self, mock_run: unittest.mock.Mock) -> None:
        mock_run.return_value = completed(0, f"{RESULT_MARKER}{{oops\n")
        with ignite_env() as env:
            with self.assertRaises(PluginError):
                initialize_plugin("ignite-x", env.cwd, {})

    @unittest.mock.patch("ignite_cli.lib.plugins.subprocess.run")
    def test_last_marker_wins(self, mock_run: unittest.mock.Mock) -> None:
        stdout = _result({"first": True}) + _result({"second": True})
        mock_run.return_value = completed(0, stdout)
        with ignite_env() as env:
            self.assertEqual(initialize_plugin("ignite-x", env.cwd, {}), {"second": True})

    @unittest.mock.patch("ignite_cli.lib.plugins.subprocess.run")
    def test_failing_hook(self, mock_run: unittest.mock.Mock) -> None:
        mock_run.return_value = completed(1, "", "Error: boom\n    at initialize")
        with ignite_env() as env:
            with self.assertRaises(PluginError) as ctx:
                initialize_plugin("ignite-x", env.cwd, {})
        self.assertIn("Error: boom", ctx.exception.message)

    @unittest.mock.patch("ignite_cli.lib.plugins.subprocess.run", side_effect=FileNotFoundError("node"))
    def test_missing_node(self, _run: unittest.mock.Mock) -> None:
        with ignite_env() as env:
            with self.assertRaises(ToolError):
                initialize_plugin("ignite-x", env.cwd, {})


if __name__ == "__main__":
    unittest.main()
