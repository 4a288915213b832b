import xml.etree.ElementTree as ET

CARD_BRIEF = "实时天气"
CARD_SOURCE_NAME = "chat qq"
CARD_SOURCE_ICON = "https://github.githubassets.com/favicons/favicon.svg"
CARD_IMAGE_DIR = "./res/images/weahter"


def build_weather_card(
    weather_id: str,
    url: str,
    title: str = CARD_BRIEF,
    summary: str = "",
) -> str:
    """
    Build the structured XML message advertising a weather card.

    Args:
        weather_id: Image id shown as the card cover
        url: Click-through link of the card and its source
        title: Card title line
        summary: Card summary line

    Returns:
        Serialized ``<msg>`` document
    """
    msg = ET.Element(
        "msg",
        {
            "flag": "1",
            "serviceID": "1",
            "brief": CARD_BRIEF,
            "templateID": "1",
            "action": "web",
            "url": url,
        },
    )

    item = ET.SubElement(msg, "item", {"layout": "0"})
    ET.SubElement(item, "title").text = title
    ET.SubElement(item, "summary").text = summary
    ET.SubElement(item, "picture", {"cover": f"{CARD_IMAGE_DIR}/{weather_id}"})

    ET.SubElement(
        msg,
        "source",
        {
            "name": CARD_SOURCE_NAME,
            "icon": CARD_SOURCE_ICON,
            "url": url,
            "action": "web",
            "appid": "-1",
        },
    )

    return ET.tostring(msg, encoding="unicode", xml_declaration=True)
