import io
import json
import unittest
import unittest.mock
from contextlib import redirect_stderr

from test_utils import ignite_env, make_ignite_dir

from ignite_cli.lib import doctor


def _fake_which(tool: str) -> str | None:
    return {"node": "/usr/bin/node", "npm": "/usr/bin/npm"}.get(tool)


class ProjectVersionTests(unittest.TestCase):
    def test_reads_installed_react_native(self) -> None:
        with ignite_env() as env:
            pkg_dir = env.cwd / "node_modules" / "react-native"
            pkg_dir.mkdir(parents=True)
            (pkg_dir / "package.json").write_text(json.dumps({"version": "0.31.0"}), encoding="utf-8")
            self.assertEqual(doctor.project_react_native_version(env.cwd), "0.31.0")

    def test_missing_or_broken_package_json(self) -> None:
        with ignite_env() as env:
            self.assertEqual(doctor.project_react_native_version(env.cwd), doctor.PLACEHOLDER)
            pkg_dir = env.cwd / "node_modules" / "react-native"
            pkg_dir.mkdir(parents=True)
            (pkg_dir / "package.json").write_text("{not json", encoding="utf-8")
            self.assertEqual(doctor.project_react_native_version(env.cwd), doctor.PLACEHOLDER)
            (pkg_dir / "package.json").write_text("[]", encoding="utf-8")
            self.assertEqual(doctor.project_react_native_version(env.cwd), doctor.PLACEHOLDER)


class GatherReportTests(unittest.TestCase):
    @unittest.mock.patch("ignite_cli.lib.doctor.tool_version", return_value="10.2.0")
    @unittest.mock.patch("ignite_cli.lib.doctor.which", side_effect=_fake_which)
    def test_missing_tools_get_placeholders(
        self, _which: unittest.mock.Mock, mock_version: unittest.mock.Mock
    ) -> None:
        with ignite_env() as env:
            make_ignite_dir(env.cwd)
            report = doctor.gather_report(env.cwd)
        self.assertEqual(report.node, doctor.ToolInfo("10.2.0", "/usr/bin/node"))
        self.assertEqual(report.npm.path, "/usr/bin/npm")
        self.assertEqual(report.yo, doctor.ToolInfo())
        self.assertTrue(report.in_project)
        self.assertEqual(report.react_native, doctor.PLACEHOLDER)
        self.assertTrue(report.python)
        mock_version.assert_any_call("/usr/bin/node")

    @unittest.mock.patch("ignite_cli.lib.doctor.tool_version", return_value="v20.11.0")
    @unittest.mock.patch("ignite_cli.lib.doctor.which", side_effect=_fake_which)
    def test_broken_global_config_still_reports(
        self, _which: unittest.mock.Mock, _version: unittest.mock.Mock
    ) -> None:
        with ignite_env("tools: [unclosed\n") as env, redirect_stderr(io.StringIO()) as stderr:
            report = doctor.gather_report(env.cwd)
        self.assertIsInstance(report, doctor.DoctorReport)
        self.assertEqual(report.node.path, "/usr/bin/node")
        self.assertIn("Could not parse", stderr.getvalue())

    @unittest.mock.patch("ignite_cli.lib.doctor.tool_version", return_value=None)
    @unittest.mock.patch("ignite_cli.lib.doctor.which", return_value="/usr/bin/yo")
    def test_unknown_version_is_placeholder(
        self, _which: unittest.mock.Mock, _version: unittest.mock.Mock
    ) -> None:
        with ignite_env() as env:
            report = doctor.gather_report(env.cwd)
        self.assertEqual(report.yo.version, doctor.PLACEHOLDER)
        self.assertEqual(report.yo.path, "/usr/bin/yo")
        self.assertFalse(report.in_project)


if __name__ == "__main__":
    unittest.main()
