"""Lexical tables for release-name parsing.

Every table maps one canonical value to the surface aliases that denote it.
Aliases are written with their natural separators; the alias matcher treats
``.``, ``-``, ``_`` and space as interchangeable (and optional) when comparing.

Aliases listed in a ``*_CASE_SENSITIVE`` set only match with the exact case
given, because in any other case they are ordinary words.
"""

from __future__ import annotations

from typing import Final

# Based on the scene release-type taxonomy (CAM through Remux).
SOURCES: Final[dict[str, tuple[str, ...]]] = {
    "CAM": ("CAM", "CAMRip", "CAM-Rip", "HDCAM"),
    "TS": ("TS", "TELESYNC", "HDTS", "PDVD", "PreDVDRip"),
    "WP": ("WP", "WORKPRINT"),
    "TC": ("TC", "TELECINE", "HDTC"),
    "PPVRip": ("PPV", "PPVRip", "PPV-Rip"),
    "SCR": ("SCR", "SCREENER", "DVDSCR", "DVDSCREENER", "BDSCR", "WEBSCREENER"),
    "DDC": ("DDC",),
    "R5": ("R5", "R5.LINE"),
    "DVDRip": ("DVDRip", "DVD-Rip", "DVDMux"),
    "DVD-R": ("DVDR", "DVD-R", "DVD-Full", "Full-Rip", "ISO rip", "DVD-5", "DVD-9", "DVD5", "DVD9"),
    "DSR": ("DSR", "DSRip", "SATRip", "DTHRip", "DVBRip", "PDTV", "DTVRip", "TVRip", "HDTVRip"),
    "HDTV": ("HDTV", "UHDTV", "AHDTV"),
    "VODRip": ("VODRip", "VODR"),
    "HC": ("HC",),
    "HDRip": ("HDRip", "HD-Rip", "WEB-DLRip"),
    "WEB-DL": ("WEB-DL", "WEBDL", "WEB DL", "WEB-DLMux"),
    "WEBRip": ("WEBRip", "WEB-Rip", "WEB Rip", "WEBCap", "WEB-Cap"),
    "WEB": ("WEB",),
    "BluRay": ("BluRay", "Blu-Ray", "BDRip", "BRRip", "BDMV", "BDR", "BD25", "BD50", "BD66", "BD100", "BD5", "BD9"),
    "Remux": ("Remux", "BDRemux", "BD-Remux"),
    "DCP": ("DCP",),
}

SOURCES_CASE_SENSITIVE: Final[frozenset[str]] = frozenset(
    {"CAM", "TS", "WP", "TC", "SCR", "DDC", "R5", "DSR", "HC", "PPV", "DCP", "BDR", "PDVD"}
)

# Disc sources that a neighbouring "Remux" token upgrades to Remux.
REMUX_UPGRADABLE_SOURCES: Final[frozenset[str]] = frozenset({"BluRay", "DVD-R", "DVDRip"})

FORMATS: Final[dict[str, tuple[str, ...]]] = {
    "x264": ("x264",),
    "x265": ("x265",),
    "H.264": ("H.264", "h.264"),
    "H.265": ("H.265", "h.265"),
    "H264": ("H264",),
    "H265": ("H265",),
    "h264": ("h264",),
    "h265": ("h265",),
    "AVC": ("AVC",),
    "HEVC": ("HEVC",),
    "AV1": ("AV1",),
    "VP9": ("VP9",),
    "VC-1": ("VC-1", "VC1"),
    "XviD": ("XviD",),
    "DivX": ("DivX",),
    "MPEG2": ("MPEG2", "MPEG-2"),
    "MPEG4": ("MPEG4", "MPEG-4"),
    "SVCD": ("SVCD",),
    "VCD": ("VCD",),
}

# H.26x spellings are reported exactly as written.
FORMATS_CASE_SENSITIVE: Final[frozenset[str]] = frozenset(
    {"H.264", "h.264", "H.265", "h.265", "H264", "h264", "H265", "h265"}
)

AUDIO_CODECS: Final[dict[str, tuple[str, ...]]] = {
    "TrueHD": ("TrueHD", "True-HD", "Dolby TrueHD"),
    "DTS-HD MA": ("DTS-HD MA", "DTS-HDMA", "DTS-MA", "DTSHD MA"),
    "DTS-HD HRA": ("DTS-HD HRA", "DTS-HDHRA"),
    "DTS-HD": ("DTS-HD", "DTSHD"),
    "DTS-X": ("DTS-X", "DTS:X", "DTSX"),
    "DTS-ES": ("DTS-ES",),
    "DTS": ("DTS",),
    "DDP": ("DDP", "DD+", "Dolby Digital Plus"),
    "EAC3": ("EAC3", "E-AC3", "E-AC-3", "EAC-3"),
    "DD": ("DD", "Dolby Digital"),
    "AC3": ("AC3", "AC-3"),
    "AAC": ("AAC", "HE-AAC", "AAC-LC"),
    "FLAC": ("FLAC",),
    "OPUS": ("OPUS", "Opus"),
    "LPCM": ("LPCM",),
    "PCM": ("PCM",),
    "MP3": ("MP3",),
    "MP2": ("MP2",),
}

AUDIO_CASE_SENSITIVE: Final[frozenset[str]] = frozenset({"DD"})

HDR_TOKENS: Final[dict[str, tuple[str, ...]]] = {
    "DV": ("DV", "DoVi", "Dolby Vision"),
    "HDR10Plus": ("HDR10Plus", "HDR10+", "HDR10P"),
    "HDR10": ("HDR10",),
    "HDR": ("HDR",),
    "HLG": ("HLG",),
    "SDR": ("SDR",),
}

HDR_CASE_SENSITIVE: Final[frozenset[str]] = frozenset({"DV"})

FLAGS: Final[dict[str, tuple[str, ...]]] = {
    "READNFO": ("READNFO", "READ NFO"),
    "PROPER": ("PROPER",),
    "REPACK": ("REPACK",),
    "RERIP": ("RERIP",),
    "REAL": ("REAL",),
    "INTERNAL": ("INTERNAL", "iNTERNAL"),
    "TV Dubbed": ("TV Dubbed",),
    "Dubbed": ("Dubbed",),
    "Subbed": ("Subbed",),
    "Hard Sub": ("Hard Sub", "Hard Subs"),
    "MultiSub": ("MultiSub",),
    "Multi-Subs": ("Multi-Subs",),
    "Uncut": ("Uncut",),
    "Uncensored": ("Uncensored",),
    "Unrated": ("Unrated",),
    "Director's Cut": ("Director's Cut", "Directors Cut"),
    "Extended": ("Extended", "Extended Cut"),
    "Theatrical": ("Theatrical",),
    "Limited Edition": ("Limited Edition",),
    "Limited": ("LIMITED",),
    "Special Edition": ("Special Edition",),
    "Collector's Edition": ("Collector's Edition", "Collectors Edition"),
    "Ultimate Edition": ("Ultimate Edition",),
    "IMAX HYBRID": ("IMAX HYBRID",),
    "IMAX": ("IMAX",),
    "HYBRID": ("HYBRID",),
    "3D": ("3D", "HSBS"),
    "10bit": ("10bit", "Hi10P"),
    "REMASTERED": ("REMASTERED",),
    "ANiME": ("ANiME",),
    "NUKED": ("NUKED",),
    "DUPE": ("DUPE",),
    "RETAIL": ("RETAIL",),
    "NFOFIX": ("NFOFIX", "NFO FIX"),
    "DIRFIX": ("DIRFIX", "DIR FIX"),
    "SUBFIX": ("SUBFIX",),
    "COMPLETE": ("COMPLETE",),
    "FESTIVAL": ("FESTIVAL",),
    "STV": ("STV",),
    "WS": ("WS",),
    "Surround Sound": ("Surround Sound",),
    "Dual Audio": ("Dual Audio",),
}

FLAGS_CASE_SENSITIVE: Final[frozenset[str]] = frozenset(
    {"REAL", "INTERNAL", "iNTERNAL", "LIMITED", "ANiME", "COMPLETE", "FESTIVAL", "WS"}
)

# Language code -> (English name, aliases).
LANGUAGES: Final[dict[str, tuple[str, tuple[str, ...]]]] = {
    "en": ("English", ("English", "ENG")),
    "de": ("German", ("German", "Deutsch", "GER")),
    "fr": ("French", ("French", "TRUEFRENCH", "VFF", "VFQ")),
    "es": ("Spanish", ("Spanish", "Castellano", "Latino")),
    "it": ("Italian", ("Italian", "ITA")),
    "pt": ("Portuguese", ("Portuguese", "PT-BR")),
    "ru": ("Russian", ("Russian", "RUS")),
    "nl": ("Dutch", ("Dutch", "Flemish")),
    "pl": ("Polish", ("Polish",)),
    "sv": ("Swedish", ("Swedish", "SWE")),
    "no": ("Norwegian", ("Norwegian", "NORDiC")),
    "da": ("Danish", ("Danish",)),
    "fi": ("Finnish", ("Finnish",)),
    "is": ("Icelandic", ("Icelandic",)),
    "ja": ("Japanese", ("Japanese", "JAP", "JPN")),
    "zh": ("Chinese", ("Chinese", "Mandarin", "Cantonese", "CHS", "CHT")),
    "ko": ("Korean", ("Korean", "KOR")),
    "ar": ("Arabic", ("Arabic",)),
    "tr": ("Turkish", ("Turkish",)),
    "hi": ("Hindi", ("Hindi",)),
    "hu": ("Hungarian", ("Hungarian", "HUN")),
    "cs": ("Czech", ("Czech",)),
    "el": ("Greek", ("Greek",)),
    "he": ("Hebrew", ("Hebrew",)),
    "th": ("Thai", ("THAI",)),
    "vi": ("Vietnamese", ("Vietnamese",)),
    "uk": ("Ukrainian", ("Ukrainian",)),
    "ro": ("Romanian", ("Romanian",)),
    "multi": ("Multilingual", ("MULTi", "MULTI", "Multi")),
}

LANGUAGES_CASE_SENSITIVE: Final[frozenset[str]] = frozenset(
    {
        "ENG",
        "GER",
        "VFF",
        "VFQ",
        "ITA",
        "RUS",
        "SWE",
        "JAP",
        "JPN",
        "CHS",
        "CHT",
        "KOR",
        "HUN",
        "THAI",
        "Latino",
        "MULTi",
        "MULTI",
        "Multi",
    }
)

# Codes only trusted inside a bracketed block ("[DE]", "[Eng.Hard.Sub]").
LANGUAGE_BRACKET_CODES: Final[dict[str, str]] = {
    "EN": "en",
    "ENG": "en",
    "DE": "de",
    "GER": "de",
    "FR": "fr",
    "FRE": "fr",
    "ES": "es",
    "SPA": "es",
    "IT": "it",
    "PT": "pt",
    "RU": "ru",
    "NL": "nl",
    "PL": "pl",
    "SV": "sv",
    "NO": "no",
    "DA": "da",
    "FI": "fi",
    "JA": "ja",
    "JP": "ja",
    "ZH": "zh",
    "KO": "ko",
    "KR": "ko",
    "AR": "ar",
    "TR": "tr",
}

# Parenthesised region codes ("(CA)") that mark a regional release. Codes that
# are also language codes ("(DE)", "(JP)") go through LANGUAGE_BRACKET_CODES.
COUNTRY_CODES: Final[dict[str, str]] = {
    "CA": "Canadian",
    "US": "US",
    "UK": "UK",
    "AU": "Australian",
    "CN": "Chinese",
}

# Subtitle flags that also make a release multilingual.
MULTILINGUAL_FLAGS: Final[frozenset[str]] = frozenset({"MultiSub", "Multi-Subs"})

# Dual-language marker; claimed by the language step without adding an entry.
DUAL_LANGUAGE_MARKER: Final[str] = "DL"

DEVICES: Final[dict[str, tuple[str, ...]]] = {
    "XBOX": ("XBOX", "XBOX360", "XBOXONE", "XBOX ONE"),
    "PS2": ("PS2",),
    "PS3": ("PS3",),
    "PS4": ("PS4",),
    "PS5": ("PS5",),
    "PSP": ("PSP",),
    "PSV": ("PSV", "PS Vita"),
    "Wii": ("Wii",),
    "WiiU": ("WiiU", "Wii U"),
    "Switch": ("NSW", "Nintendo Switch"),
    "3DS": ("3DS",),
    "NDS": ("NDS",),
    "GameCube": ("GameCube", "NGC"),
    "Android": ("Android",),
    "iOS": ("iOS",),
}

DEVICES_CASE_SENSITIVE: Final[frozenset[str]] = frozenset({"NGC", "NSW", "NDS", "PSV", "PSP", "iOS", "Android"})

OPERATING_SYSTEMS: Final[dict[str, tuple[str, ...]]] = {
    "Windows": ("Windows", "WiN", "Win32", "Win64", "WINDOWS"),
    "Linux": ("Linux", "LiNUX", "LINUX"),
    "MacOS": ("MacOS", "MacOSX", "OSX", "MAC OS X"),
    "Unix": ("Unix", "UNIX"),
    "BSD": ("FreeBSD", "OpenBSD"),
}

OPERATING_SYSTEMS_CASE_SENSITIVE: Final[frozenset[str]] = frozenset({"WiN", "OSX"})

# Extensions stripped from the end of a file name before parsing.
MEDIA_EXTENSIONS: Final[tuple[str, ...]] = (
    ".mkv",
    ".mp4",
    ".avi",
    ".mov",
    ".wmv",
    ".flv",
    ".webm",
    ".m4v",
    ".m2ts",
    ".ts",
    ".mpg",
    ".mpeg",
    ".vob",
    ".iso",
    ".srt",
    ".ass",
    ".ssa",
    ".sub",
    ".idx",
    ".vtt",
    ".sup",
    ".nfo",
    ".nzb",
    ".torrent",
    ".rar",
    ".zip",
)

__all__ = [
    "AUDIO_CASE_SENSITIVE",
    "AUDIO_CODECS",
    "COUNTRY_CODES",
    "DEVICES",
    "DEVICES_CASE_SENSITIVE",
    "DUAL_LANGUAGE_MARKER",
    "FLAGS",
    "FLAGS_CASE_SENSITIVE",
    "FORMATS",
    "FORMATS_CASE_SENSITIVE",
    "HDR_CASE_SENSITIVE",
    "HDR_TOKENS",
    "LANGUAGES",
    "LANGUAGES_CASE_SENSITIVE",
    "LANGUAGE_BRACKET_CODES",
    "MEDIA_EXTENSIONS",
    "MULTILINGUAL_FLAGS",
    "OPERATING_SYSTEMS",
    "OPERATING_SYSTEMS_CASE_SENSITIVE",
    "REMUX_UPGRADABLE_SOURCES",
    "SOURCES",
    "SOURCES_CASE_SENSITIVE",
]
