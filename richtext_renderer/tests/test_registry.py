"""Tests for the renderer dispatch table and built-in renderers."""
import unittest

from richtext_renderer.model.render_options import RenderOptions
from richtext_renderer.renderer.registry import (
    EVENT_MODEL_TYPE,
    IMAGE_REF_TYPE,
    RendererRegistry,
    asset_renderer,
    default_registry,
    fragment_link_renderer,
)
from richtext_renderer.renderer.utils import HtmlElement


class RendererRegistryTest(unittest.TestCase):
    """Registration API behaviour."""

    def test_register_and_lookup(self) -> None:
        registry = RendererRegistry()
        render_fn = lambda fields: fields["x"]
        registry.register("Custom", render_fn)

        self.assertIn("Custom", registry)
        self.assertIs(registry["Custom"], render_fn)
        self.assertIsNone(registry.get("Missing"))
        self.assertEqual(len(registry), 1)

    def test_decorator_registration(self) -> None:
        registry = RendererRegistry()

        @registry.renderer("VideoRef")
        def render_video(fields):
            return HtmlElement("video", {"src": fields["_path"]})

        self.assertIs(registry["VideoRef"], render_video)
        self.assertEqual(registry.type_names(), ["VideoRef"])

    def test_later_registration_replaces_earlier(self) -> None:
        registry = RendererRegistry({"A": lambda f: 1})
        registry.register("A", lambda f: 2)
        self.assertEqual(registry["A"]({}), 2)

    def test_invalid_registrations_rejected(self) -> None:
        registry = RendererRegistry()
        with self.assertRaises(ValueError):
            registry.register("", lambda f: None)
        with self.assertRaises(TypeError):
            registry.register("A", "not callable")  # type: ignore[arg-type]

    def test_copy_is_independent(self) -> None:
        registry = default_registry()
        clone = registry.copy()
        clone.register("Extra", lambda f: None)

        self.assertNotIn("Extra", registry)
        self.assertIn(IMAGE_REF_TYPE, clone)


class BuiltInRendererTest(unittest.TestCase):
    def test_asset_renderer_prefers_publish_url(self) -> None:
        render = asset_renderer()
        output = render({"_path": "/content/dam/a.jpg", "_publishUrl": "https://publish/a.jpg"})
        self.assertEqual(output, HtmlElement("img", {"src": "https://publish/a.jpg", "alt": "in-line reference"}))

    def test_asset_renderer_falls_back_to_path(self) -> None:
        output = asset_renderer()({"_path": "/content/dam/a.jpg"})
        self.assertEqual(output.attributes["src"], "/content/dam/a.jpg")

    def test_asset_renderer_without_url_raises(self) -> None:
        with self.assertRaises(KeyError):
            asset_renderer()({"mimetype": "image/png"})

    def test_fragment_link_renderer(self) -> None:
        render = fragment_link_renderer()
        output = render({"slug": "ski-trip", "eventName": "Ski Trip", "capacity": "40"})
        self.assertEqual(output, HtmlElement("a", {"href": "/event:ski-trip"}, "Ski Trip: 40"))

    def test_fragment_link_renderer_missing_slug_raises(self) -> None:
        with self.assertRaises(KeyError):
            fragment_link_renderer()({"eventName": "Ski Trip", "capacity": "40"})

    def test_default_registry_honours_options(self) -> None:
        options = RenderOptions(event_route="/events/{slug}", fragment_label_fields=("eventName",), asset_alt="inline")
        registry = default_registry(options)

        self.assertEqual(registry.type_names(), sorted([IMAGE_REF_TYPE, EVENT_MODEL_TYPE]))
        link = registry[EVENT_MODEL_TYPE]({"slug": "run", "eventName": "Run"})
        self.assertEqual(link, HtmlElement("a", {"href": "/events/run"}, "Run"))
        image = registry[IMAGE_REF_TYPE]({"_path": "/a.png"})
        self.assertEqual(image.attributes["alt"], "inline")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
