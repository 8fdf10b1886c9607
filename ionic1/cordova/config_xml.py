"""Editing the <content src> of a Cordova config.xml for live reload."""

from __future__ import annotations

from pathlib import Path
from xml.etree import ElementTree as ET

from ionic1.errors import ConfigXmlError

WIDGETS_NS = "http://www.w3.org/ns/widgets"
CORDOVA_NS = "http://cordova.apache.org/ns/1.0"

DEFAULT_CONTENT_SRC = "index.html"


def _ns_prefix(root: ET.Element) -> str:
    """Return the "{uri}" prefix of the root element, or "" when unqualified."""
    if root.tag.startswith("{"):
        return root.tag[: root.tag.index("}") + 1]
    return ""


def _parse(path: Path) -> ET.ElementTree:
    ET.register_namespace("", WIDGETS_NS)
    ET.register_namespace("cdv", CORDOVA_NS)
    parser = ET.XMLParser(target=ET.TreeBuilder(insert_comments=True))
    try:
        return ET.parse(path, parser=parser)
    except ET.ParseError as e:
        raise ConfigXmlError(f"Unable to parse {path}: {e}")


def set_config_xml(
    app_directory: Path,
    *,
    dev_server: str | None = None,
    reset_content: bool = False,
    error_when_not_found: bool = True,
) -> bool:
    """Point the app at a dev server, or restore its original start page.

    With ``dev_server`` the current ``<content src>`` is saved in an
    ``original-src`` attribute (only the first time) and replaced by the dev
    server URL; an ``<allow-navigation href="*"/>`` entry is added so the
    webview may load it. With ``reset_content`` the saved source is put back.

    Args:
        app_directory: Project root containing config.xml.
        dev_server: URL the app should load on start.
        reset_content: Restore the saved original source.
        error_when_not_found: Raise when config.xml is missing instead of
            doing nothing.

    Returns:
        True if the file was rewritten.

    Raises:
        ConfigXmlError: If config.xml is missing (and error_when_not_found)
            or cannot be parsed.
    """
    path = Path(app_directory) / "config.xml"
    if not path.is_file():
        if error_when_not_found:
            raise ConfigXmlError(f"Unable to locate config.xml in {app_directory}")
        return False

    tree = _parse(path)
    root = tree.getroot()
    ns = _ns_prefix(root)
    changed = False

    content = root.find(f"{ns}content")

    if dev_server:
        if content is None:
            content = ET.SubElement(root, f"{ns}content", {"src": DEFAULT_CONTENT_SRC})
            changed = True
        if content.get("original-src") is None:
            content.set("original-src", content.get("src", DEFAULT_CONTENT_SRC))
            changed = True
        if content.get("src") != dev_server:
            content.set("src", dev_server)
            changed = True

        has_wildcard = any(
            nav.get("href") == "*" for nav in root.findall(f"{ns}allow-navigation")
        )
        if not has_wildcard:
            ET.SubElement(root, f"{ns}allow-navigation", {"href": "*"})
            changed = True

    elif reset_content and content is not None:
        original = content.get("original-src")
        if original is not None:
            content.set("src", original)
            del content.attrib["original-src"]
            changed = True

    if changed:
        tree.write(path, encoding="utf-8", xml_declaration=True)
    return changed


class ConfigXml:
    """Object form of set_config_xml, injected into commands."""

    def set_config_xml(
        self,
        app_directory: Path,
        *,
        dev_server: str | None = None,
        reset_content: bool = False,
        error_when_not_found: bool = True,
    ) -> bool:
        return set_config_xml(
            app_directory,
            dev_server=dev_server,
            reset_content=reset_content,
            error_when_not_found=error_when_not_found,
        )
