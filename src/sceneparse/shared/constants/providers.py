"""Streaming provider alias table.

Canonical scene tag -> every surface spelling seen in release names. Code-like
aliases (short or all upper case) match case-sensitively, brand names match in
any case.
"""

from __future__ import annotations

from typing import Final

STREAMING_PROVIDERS: Final[dict[str, tuple[str, ...]]] = {
    # International services
    "9NOW": ("9NOW", "9Now"),
    "A3P": ("A3P", "Atresplayer"),
    "AE": ("AE", "A&E"),
    "ABC": ("ABC",),
    "AJAZ": ("AJAZ", "Al Jazeera"),
    "ALL4": ("ALL4", "All 4"),
    "AMC": ("AMC", "AMC+"),
    "AMZN": ("AMZN", "Amazon", "Prime Video", "Amazon Prime", "Amazon Prime Video"),
    "ANLB": ("ANLB", "AnimeLab"),
    "ANPL": ("ANPL", "Animal Planet"),
    "APPS": ("APPS", "Africa Play"),
    "ARD": ("ARD", "ARD Mediathek"),
    "AS": ("AS", "Adult Swim"),
    "ATVP": ("ATVP", "Apple TV+", "AppleTVPlus", "AppleTV"),
    "AUBC": ("AUBC", "ABC Australia"),
    "BCORE": ("BCORE", "Bravia Core"),
    "BK": ("BK",),
    "BNGE": ("BNGE",),
    "BOOM": ("BOOM",),
    "BRAV": ("BRAV", "BravoTV"),
    "CBC": ("CBC", "CBC Gem"),
    "CBS": ("CBS", "CBS All Access"),
    "CC": ("CC", "Comedy Central"),
    "CHGD": ("CHGD", "CHRGD"),
    "CLBI": ("CLBI", "Club Illico"),
    "CMAX": ("CMAX", "Cinemax"),
    "CMOR": ("CMOR", "C More"),
    "CMT": ("CMT",),
    "CN": ("CN", "Cartoon Network"),
    "CNBC": ("CNBC",),
    "CNLP": ("CNLP", "Canal+"),
    "COOK": ("COOK", "Cooking Channel"),
    "CR": ("CR", "Crunchyroll"),
    "CRAV": ("CRAV",),
    "CRIT": ("CRIT", "Criterion Channel"),
    "CRKL": ("CRKL", "Crackle"),
    "CRKI": ("CRKI",),
    "CSPN": ("CSPN", "CSpan", "C-SPAN"),
    "CTV": ("CTV",),
    "CUR": ("CUR", "CuriosityStream"),
    "CW": ("CW", "The CW"),
    "CWS": ("CWS", "CW Seed"),
    "DCU": ("DCU", "DC Universe"),
    "DDY": ("DDY", "Digiturk Diledigin Yerde"),
    "DEST": ("DEST", "Destination America"),
    "DF": ("DF", "DramaFever"),
    "DISC": ("DISC",),
    "DSCP": ("DSCP", "Discovery+", "Discovery Plus", "DiscoveryPlus"),
    "DIY": ("DIY", "DIY Network"),
    "DPLY": ("DPLY", "dplay"),
    "DRPO": ("DRPO",),
    "DRTV": ("DRTV", "DR TV"),
    "DSNP": ("DSNP", "Disney+", "DisneyPlus", "Disney Plus"),
    "DSNY": ("DSNY", "Disney", "Disney Channel"),
    "DTV": ("DTV", "DirecTV"),
    "DW": ("DW",),
    "DLWP": ("DLWP",),
    "EPIX": ("EPIX", "MGM+"),
    "ESPN": ("ESPN",),
    "ESPN+": ("ESPN+", "ESPN Plus", "ESPNPlus"),
    "ESQ": ("ESQ",),
    "ETTV": ("ETTV", "El Trece"),
    "ETV": ("ETV",),
    "FAH": ("FAH", "Filmin"),
    "FAM": ("FAM",),
    "FBWatch": ("FBWatch", "Facebook Watch"),
    "FJR": ("FJR", "Family Jr"),
    "FOOD": ("FOOD", "Food Network"),
    "FOX": ("FOX",),
    "FPT": ("FPT", "FPT Play"),
    "FREE": ("FREE", "Freevee"),
    "FTV": ("FTV",),
    "FUNI": ("FUNI", "FUNi", "Funimation"),
    "FXTL": ("FXTL", "FX Now"),
    "FYI": ("FYI",),
    "GC": ("GC", "NHL GameCenter"),
    "GLBL": ("GLBL",),
    "GLOB": ("GLOB", "GloboSat Play"),
    "GLBO": ("GLBO", "Globoplay"),
    "GO90": ("GO90",),
    "GPLAY": ("GPLAY", "Google Play", "PLAY"),
    "HBO": ("HBO", "HBO Go"),
    "HMAX": ("HMAX", "HBO Max"),
    "MAX": ("MAX",),
    "HGTV": ("HGTV",),
    "HIDI": ("HIDI", "HIDIVE", "HiDive"),
    "HIST": ("HIST",),
    "HLMK": ("HLMK",),
    "HPLAY": ("HPLAY", "Hungama Play"),
    "HTSR": ("HTSR", "Hotstar", "Disney+ Hotstar"),
    "HS": ("HS",),
    "HULU": ("HULU", "Hulu"),
    "iP": ("iP", "BBC iPlayer", "iPlayer"),
    "BBC": ("BBC",),
    "iQIYI": ("iQIYI",),
    "iT": ("iT", "iTunes"),
    "ITV": ("ITV", "ITV Hub"),
    "ITVX": ("ITVX",),
    "JC": ("JC", "JioCinema"),
    "KAYO": ("KAYO", "Kayo Sports"),
    "KNOW": ("KNOW", "Knowledge Network"),
    "KNPY": ("KNPY", "Kanopy"),
    "KS": ("KS", "Kaleidescape"),
    "LGP": ("LGP", "Lionsgate Play"),
    "LIFE": ("LIFE",),
    "LN": ("LN", "Love Nature"),
    "MA": ("MA", "Movies Anywhere"),
    "MBC": ("MBC",),
    "MMAX": ("MMAX", "ManoramaMAX"),
    "MNBC": ("MNBC", "MSNBC"),
    "MS": ("MS", "Microsoft Store"),
    "MTOD": ("MTOD", "Motor Trend OnDemand"),
    "MTV": ("MTV",),
    "MUBI": ("MUBI", "Mubi"),
    "MY5": ("MY5", "My5"),
    "NATG": ("NATG", "National Geographic"),
    "NBA": ("NBA", "NBA TV"),
    "NBC": ("NBC",),
    "NBLA": ("NBLA", "Nebula"),
    "NF": ("NF", "Netflix"),
    "NFL": ("NFL",),
    "NFLN": ("NFLN", "NFL Now"),
    "NICK": ("NICK", "Nickelodeon"),
    "NOW": ("NOW", "NOW TV"),
    "NRK": ("NRK",),
    "ODK": ("ODK", "OnDemandKorea"),
    "OPTO": ("OPTO",),
    "OSN": ("OSN", "OSN+"),
    "OXGN": ("OXGN",),
    "PBS": ("PBS",),
    "PBSK": ("PBSK", "PBS Kids"),
    "PCOK": ("PCOK", "Peacock"),
    "PLUZ": ("PLUZ", "Pluzz"),
    "PMNT": ("PMNT",),
    "PMTP": ("PMTP", "Paramount+", "Paramount Plus", "ParamountPlus", "Paramount"),
    "POGO": ("POGO",),
    "PSN": ("PSN", "PlayStation Network"),
    "PUHU": ("PUHU", "PuhuTV"),
    "QIBI": ("QIBI", "Quibi"),
    "RED": ("RED", "YouTube Red", "YouTube Premium"),
    "RKTN": ("RKTN", "Rakuten TV"),
    "ROKU": ("ROKU", "Roku Channel"),
    "RSTR": ("RSTR", "Rooster Teeth"),
    "RTE": ("RTE", "RTE Player"),
    "RTP": ("RTP",),
    "RTPPLAY": ("RTPPLAY", "RTP Play"),
    "SAINA": ("SAINA", "Saina Play"),
    "SP": ("SP",),
    "SBS": ("SBS", "SBS On Demand"),
    "SESO": ("SESO", "Seeso"),
    "SHDR": ("SHDR", "Shudder"),
    "SHMI": ("SHMI", "Shomi"),
    "SHO": ("SHO", "Showtime", "Showtime Anytime"),
    "SKST": ("SKST", "SkyShowtime"),
    "SLNG": ("SLNG", "Sling TV"),
    "SNET": ("SNET", "Sportsnet"),
    "SNXT": ("SNXT", "Sun NXT"),
    "SPIK": ("SPIK",),
    "SPRT": ("SPRT",),
    "SS": ("SS",),
    "STAN": ("STAN",),
    "STRP": ("STRP", "Star+"),
    "STZ": ("STZ", "STARZ", "Starz"),
    "SVT": ("SVT", "SVT Play"),
    "SYFY": ("SYFY", "Syfy"),
    "TEN": ("TEN", "10 Play"),
    "TIMV": ("TIMV", "TIMvision"),
    "TK": ("TK", "Tubi Kids"),
    "TLC": ("TLC",),
    "TOU": ("TOU", "ICI Tou.tv"),
    "TRVL": ("TRVL", "Travel Channel"),
    "TUBI": ("TUBI", "Tubi"),
    "TV2": ("TV2",),
    "TV3": ("TV3",),
    "TV4": ("TV4", "TV4 Play"),
    "TVING": ("TVING", "Tving"),
    "TVL": ("TVL", "TV Land"),
    "TVNZ": ("TVNZ",),
    "UFC": ("UFC", "UFC Fight Pass"),
    "UKTV": ("UKTV",),
    "UNIV": ("UNIV", "Univision"),
    "USAN": ("USAN", "USA Network"),
    "VH1": ("VH1",),
    "VIAP": ("VIAP", "Viaplay"),
    "VICE": ("VICE", "Viceland"),
    "VIKI": ("VIKI", "Viki"),
    "VIU": ("VIU", "Viu"),
    "VLCT": ("VLCT",),
    "VMEO": ("VMEO", "Vimeo"),
    "VRV": ("VRV",),
    "VTRN": ("VTRN",),
    "WAVVE": ("WAVVE", "Wavve"),
    "WNET": ("WNET", "W Network"),
    "WTCH": ("WTCH", "Watcha"),
    "WWEN": ("WWEN", "WWE Network"),
    "XBOX": ("Xbox Video",),
    "YT": ("YT", "YouTube", "YouTube Movies"),
    "YTTV": ("YouTube TV",),
    "ZDF": ("ZDF",),
    # Japanese broadcasters and services
    "ABMA": ("ABMA", "Abema", "AbemaTV"),
    "ADN": ("ADN", "Animation Digital Network"),
    "ANIMAX": ("ANIMAX", "Animax"),
    "AO": ("AO",),
    "AT-X": ("AT-X", "ATX"),
    "Baha": ("Baha", "Bahamut"),
    "B-Global": ("B-Global", "Bstation", "Bilibili"),
    "BSP": ("BSP", "NHK-BSP"),
    "BS4": ("BS4",),
    "BS5": ("BS5", "EX-BS", "BS-EX"),
    "BS6": ("BS6",),
    "BS7": ("BS7", "BS-TX"),
    "BSJ": ("BSJ",),
    "BS8": ("BS8", "BS-Fuji"),
    "BS11": ("BS11",),
    "BS12": ("BS12",),
    "CS-Fuji ONE": ("CS-Fuji ONE",),
    "CX": ("CX", "Fuji TV"),
    "DMM": ("DMM",),
    "EX": ("EX", "TV Asahi"),
    "CS3": ("CS3", "EX-CS1", "CS-EX1"),
    "CSA": ("CSA",),
    "FOD": ("FOD",),
    "KBC": ("KBC",),
    "M-ON!": ("M-ON!",),
    "MX": ("MX", "Tokyo MX"),
    "NHKG": ("NHKG", "NHK General"),
    "NHKE": ("NHKE", "NHK Educational"),
    "NTV": ("NTV", "Nippon TV"),
    "TBS": ("TBS",),
    "TX": ("TX", "TV Tokyo"),
    "UNXT": ("UNXT", "U-NEXT"),
    "WAKA": ("WAKA", "Wakanim"),
    "WOWOW": ("WOWOW", "Wowow"),
    "YTV": ("YTV",),
}

# Longest code accepted by the "resolution, provider, WEB source" slot rule
# when the token is not in the table.
UNKNOWN_PROVIDER_CODE_MAX_LENGTH: Final[int] = 6


__all__ = [
    "STREAMING_PROVIDERS",
    "UNKNOWN_PROVIDER_CODE_MAX_LENGTH",
]
