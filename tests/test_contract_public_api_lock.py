from __future__ import annotations

import unittest


class TestPublicApiLockContract(unittest.TestCase):
    def test_api_module_exports_are_present(self) -> None:
        import intervalgraph.api as api

        self.assertTrue(hasattr(api, "__all__"))
        self.assertIsInstance(api.__all__, (list, tuple))
        self.assertEqual(len(api.__all__), len(set(api.__all__)), "duplicate names in intervalgraph.api.__all__")

        for name in api.__all__:
            self.assertIsInstance(name, str)
            self.assertTrue(hasattr(api, name), f"intervalgraph.api missing public name: {name}")
            obj = getattr(api, name)
            self.assertIsNotNone(obj, f"intervalgraph.api {name} is None")

    def test_package_reexports_match_api_all(self) -> None:
        import intervalgraph
        import intervalgraph.api as api

        self.assertEqual(list(intervalgraph.__all__), list(api.__all__))
        for name in api.__all__:
            self.assertTrue(hasattr(intervalgraph, name), f"intervalgraph package does not re-export: {name}")
            self.assertIs(
                getattr(intervalgraph, name),
                getattr(api, name),
                f"intervalgraph.{name} must be same object as intervalgraph.api.{name}",
            )

    def test_pipeline_entrypoints_are_public(self) -> None:
        import intervalgraph

        for name in ("IntervalGraph", "GraphConfig", "Palette", "flatten", "aggregate", "create_view", "truncate"):
            self.assertIn(name, intervalgraph.__all__)

    def test_errors_share_one_base(self) -> None:
        import intervalgraph as ig

        for cls in (ig.ValidationError, ig.ComparisonError, ig.ConfigurationError, ig.LogicError, ig.PaletteError):
            self.assertTrue(issubclass(cls, ig.IntervalGraphError))
        self.assertTrue(issubclass(ig.ValidationError, ValueError))
        self.assertTrue(issubclass(ig.ComparisonError, TypeError))


if __name__ == "__main__":
    unittest.main(verbosity=2)
