"""Simple two-language (ko/en) translation helper."""

_STRINGS: dict[str, dict[str, str]] = {
    "page_title": {
        "ko": "어디서나 태양계",
        "en": "Anywhere Solar System",
    },
    "heading": {
        "ko": "우리 동네 태양계 만들기",
        "en": "Make your own local Solar System",
    },
    "intro": {
        "ko": "<a href='http://www.swedensolarsystem.se/en/'>스웨덴 태양계</a>처럼",
        "en": "Just like the <a href='http://www.swedensolarsystem.se/en/'>Sweden Solar System</a>",
    },
    "label_sun_size": {
        "ko": "태양 크기 (m)",
        "en": "Sun size (in meters)",
    },
    "label_latitude": {
        "ko": "태양 위도",
        "en": "Sun latitude",
    },
    "label_longitude": {
        "ko": "태양 경도",
        "en": "Sun longitude",
    },
    "label_place": {
        "ko": "장소 검색",
        "en": "Search for a place",
    },
    "btn_search": {
        "ko": "장소 찾기",
        "en": "Find place",
    },
    "btn_geolocate": {
        "ko": "현재 위치 사용",
        "en": "Use my current location",
    },
    "btn_build": {
        "ko": "✦ 태양계 그리기",
        "en": "✦ Build",
    },
    "btn_kml": {
        "ko": "KML 내려받기",
        "en": "Download KML",
    },
    "col_body": {
        "ko": "천체",
        "en": "Body",
    },
    "col_size": {
        "ko": "크기",
        "en": "Size",
    },
    "col_distance": {
        "ko": "중심에서 거리",
        "en": "Distance from Centre",
    },
    "error_input": {
        "ko": "입력값을 확인해 주세요: {error}",
        "en": "Please check your input: {error}",
    },
    "error_place": {
        "ko": "장소를 찾을 수 없어요. ({error})",
        "en": "Place not found. ({error})",
    },
    "error_projection": {
        "ko": "이 위치에서는 궤도를 계산할 수 없어요. ({error})",
        "en": "Orbits cannot be projected at this location. ({error})",
    },
    "geolocate_waiting": {
        "ko": "브라우저에서 위치 권한을 허용해 주세요.",
        "en": "Allow location access in your browser.",
    },
    "credits": {
        "ko": "<a href='https://github.com/pcreux/science-world-solar-system'>science-world-solar-system</a>에서 영감을 받았어요.",
        "en": "Lifted and crystalized from <a href='https://github.com/pcreux/science-world-solar-system'>github.com/pcreux/science-world-solar-system</a>",
    },
}


def t(key: str, lang: str) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(lang) or entry.get("en") or key
