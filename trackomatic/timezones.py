"""Identifier types and the mapping from IANA zone names to POSIX TZ strings."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import TypeAlias

ProjectId: TypeAlias = int
WorkspaceId: TypeAlias = int
TimeEntryId: TypeAlias = int

DEFAULT_POSIX_TIMEZONE = "GMT0"


def _numeric(hours: int, minutes: int = 0) -> str:
    """Build a numeric-abbreviation POSIX zone such as ``<+0530>-5:30``.

    ``hours`` is the offset east of UTC; a negative value means west.
    """
    sign = "-" if hours < 0 else "+"
    magnitude = abs(hours)
    if minutes:
        name = f"{sign}{magnitude:02d}{minutes:02d}"
        offset = f"{magnitude}:{minutes:02d}"
    else:
        name = f"{sign}{magnitude:02d}"
        offset = str(magnitude)
    posix_sign = "" if hours < 0 else "-"
    return f"<{name}>{posix_sign}{offset}"


_US = "M3.2.0,M11.1.0"
_EU_CET = "M3.5.0,M10.5.0/3"
_EU_EET = "M3.5.0/3,M10.5.0/4"
_EU_WET = "M3.5.0/1,M10.5.0"
_AU = "M10.1.0,M4.1.0/3"
_NZ = "M9.5.0,M4.1.0/3"

_CET = f"CET-1CEST,{_EU_CET}"
_EET = f"EET-2EEST,{_EU_EET}"
_AEST = f"AEST-10AEDT,{_AU}"
_NZST = f"NZST-12NZDT,{_NZ}"

# (POSIX string, region, space-separated city names)
_GROUPS: tuple[tuple[str, str, str], ...] = (
    ("GMT0", "Africa", "Abidjan Accra Bamako Banjul Bissau Conakry Dakar Freetown "
     "Lome Monrovia Nouakchott Ouagadougou Sao_Tome"),
    ("GMT0", "America", "Danmarkshavn"),
    ("GMT0", "Atlantic", "Reykjavik St_Helena"),
    ("GMT0", "Etc", "GMT GMT-0 GMT0 GMT+0 Greenwich"),
    ("UTC0", "Etc", "UCT UTC Universal Zulu"),
    ("EAT-3", "Africa", "Addis_Ababa Asmara Dar_es_Salaam Djibouti Kampala Mogadishu Nairobi"),
    ("EAT-3", "Indian", "Antananarivo Comoro Mayotte"),
    ("CET-1", "Africa", "Algiers Tunis"),
    ("WAT-1", "Africa", "Bangui Brazzaville Douala Kinshasa Lagos Libreville Luanda "
     "Malabo Ndjamena Niamey Porto-Novo"),
    ("CAT-2", "Africa", "Blantyre Bujumbura Gaborone Harare Juba Khartoum Kigali "
     "Lubumbashi Lusaka Maputo Windhoek"),
    ("EET-2EEST,M4.5.5/0,M10.5.4/24", "Africa", "Cairo"),
    (_numeric(1), "Africa", "Casablanca El_Aaiun"),
    (_CET, "Africa", "Ceuta"),
    (_CET, "Arctic", "Longyearbyen"),
    (_CET, "Europe", "Amsterdam Andorra Belgrade Berlin Bratislava Brussels Budapest "
     "Busingen Copenhagen Gibraltar Ljubljana Luxembourg Madrid Malta Monaco Oslo Paris "
     "Podgorica Prague Rome San_Marino Sarajevo Skopje Stockholm Tirane Vaduz Vatican "
     "Vienna Warsaw Zagreb Zurich"),
    ("SAST-2", "Africa", "Johannesburg Maseru Mbabane"),
    ("EET-2", "Africa", "Tripoli"),
    ("EET-2", "Europe", "Kaliningrad"),
    (f"HST10HDT,{_US}", "America", "Adak"),
    (f"AKST9AKDT,{_US}", "America", "Anchorage Juneau Metlakatla Nome Sitka Yakutat"),
    ("AST4", "America", "Anguilla Antigua Aruba Barbados Blanc-Sablon Curacao Dominica "
     "Grenada Guadeloupe Kralendijk Lower_Princes Marigot Martinique Montserrat "
     "Port_of_Spain Puerto_Rico Santo_Domingo St_Barthelemy St_Kitts St_Lucia "
     "St_Thomas St_Vincent Tortola"),
    (_numeric(-3), "America", "Araguaina Argentina/Buenos_Aires Argentina/Catamarca "
     "Argentina/Cordoba Argentina/Jujuy Argentina/La_Rioja Argentina/Mendoza "
     "Argentina/Rio_Gallegos Argentina/Salta Argentina/San_Juan Argentina/San_Luis "
     "Argentina/Tucuman Argentina/Ushuaia Asuncion Bahia Belem Cayenne Fortaleza "
     "Maceio Montevideo Paramaribo Punta_Arenas Recife Santarem Sao_Paulo"),
    (_numeric(-3), "Antarctica", "Palmer Rothera"),
    (_numeric(-3), "Atlantic", "Stanley"),
    ("EST5", "America", "Atikokan Cancun Cayman Jamaica Panama"),
    ("CST6", "America", "Bahia_Banderas Belize Chihuahua Costa_Rica El_Salvador "
     "Guatemala Managua Merida Mexico_City Monterrey Regina Swift_Current Tegucigalpa"),
    (_numeric(-4), "America", "Boa_Vista Campo_Grande Caracas Cuiaba Guyana La_Paz "
     "Manaus Porto_Velho"),
    (_numeric(-5), "America", "Bogota Eirunepe Guayaquil Lima Rio_Branco"),
    (f"MST7MDT,{_US}", "America", "Boise Cambridge_Bay Denver Edmonton Inuvik Yellowknife"),
    (f"CST6CDT,{_US}", "America", "Chicago Indiana/Knox Indiana/Tell_City Matamoros "
     "Menominee North_Dakota/Beulah North_Dakota/Center North_Dakota/New_Salem Ojinaga "
     "Rainy_River Rankin_Inlet Resolute Winnipeg"),
    ("MST7", "America", "Creston Dawson Dawson_Creek Fort_Nelson Hermosillo Mazatlan "
     "Phoenix Whitehorse"),
    (f"EST5EDT,{_US}", "America", "Detroit Grand_Turk Indiana/Indianapolis "
     "Indiana/Marengo Indiana/Petersburg Indiana/Vevay Indiana/Vincennes Indiana/Winamac "
     "Iqaluit Kentucky/Louisville Kentucky/Monticello Montreal Nassau New_York Nipigon "
     "Pangnirtung Port-au-Prince Thunder_Bay Toronto"),
    (f"AST4ADT,{_US}", "America", "Glace_Bay Goose_Bay Halifax Moncton Thule"),
    (f"AST4ADT,{_US}", "Atlantic", "Bermuda"),
    ("<-02>2<-01>,M3.5.0/-1,M10.5.0/0", "America", "Godthab Nuuk Scoresbysund"),
    ("CST5CDT,M3.2.0/0,M11.1.0/1", "America", "Havana"),
    (f"PST8PDT,{_US}", "America", "Los_Angeles Tijuana Vancouver"),
    (f"<-03>3<-02>,{_US}", "America", "Miquelon"),
    (_numeric(-2), "America", "Noronha"),
    (_numeric(-2), "Atlantic", "South_Georgia"),
    ("<-04>4<-03>,M9.1.6/24,M4.1.6/24", "America", "Santiago"),
    (f"NST3:30NDT,{_US}", "America", "St_Johns"),
    (_numeric(8), "Antarctica", "Casey"),
    (_numeric(8), "Asia", "Brunei Choibalsan Irkutsk Kuala_Lumpur Kuching Singapore "
     "Ulaanbaatar"),
    (_numeric(7), "Antarctica", "Davis"),
    (_numeric(7), "Asia", "Bangkok Barnaul Ho_Chi_Minh Hovd Krasnoyarsk Novokuznetsk "
     "Novosibirsk Phnom_Penh Tomsk Vientiane"),
    (_numeric(7), "Indian", "Christmas"),
    (_numeric(10), "Antarctica", "DumontDUrville"),
    (_numeric(10), "Asia", "Ust-Nera Vladivostok"),
    (_numeric(10), "Pacific", "Chuuk Port_Moresby"),
    (_AEST, "Antarctica", "Macquarie"),
    (_AEST, "Australia", "Currie Hobart Melbourne Sydney"),
    (_numeric(5), "Antarctica", "Mawson Vostok"),
    (_numeric(5), "Asia", "Almaty Aqtau Aqtobe Ashgabat Atyrau Dushanbe Oral Qyzylorda "
     "Samarkand Tashkent Yekaterinburg"),
    (_numeric(5), "Indian", "Kerguelen Maldives"),
    (_NZST, "Antarctica", "McMurdo"),
    (_NZST, "Pacific", "Auckland"),
    (_numeric(3), "Antarctica", "Syowa"),
    (_numeric(3), "Asia", "Aden Amman Baghdad Bahrain Damascus Kuwait Qatar Riyadh"),
    (_numeric(3), "Europe", "Istanbul Minsk"),
    ("<+00>0<+02>-2,M3.5.0/1,M10.5.0/3", "Antarctica", "Troll"),
    (_numeric(12), "Asia", "Anadyr Kamchatka"),
    (_numeric(12), "Pacific", "Fiji Funafuti Kwajalein Majuro Nauru Tarawa Wake Wallis"),
    (_numeric(4), "Asia", "Baku Dubai Muscat Tbilisi Yerevan"),
    (_numeric(4), "Europe", "Astrakhan Samara Saratov Ulyanovsk"),
    (_numeric(4), "Indian", "Mahe Mauritius Reunion"),
    ("EET-2EEST,M3.5.0/0,M10.5.0/0", "Asia", "Beirut"),
    (_numeric(6), "Asia", "Bishkek Dhaka Omsk Thimphu Urumqi"),
    (_numeric(6), "Indian", "Chagos"),
    (_numeric(9), "Asia", "Chita Dili Khandyga Yakutsk"),
    (_numeric(9), "Pacific", "Palau"),
    (_numeric(5, 30), "Asia", "Colombo"),
    (_EET, "Asia", "Famagusta Nicosia"),
    (_EET, "Europe", "Athens Bucharest Helsinki Kiev Mariehamn Riga Sofia Tallinn "
     "Uzhgorod Vilnius Zaporozhye"),
    ("EET-2EEST,M3.4.4/50,M10.4.4/50", "Asia", "Gaza Hebron"),
    ("HKT-8", "Asia", "Hong_Kong"),
    ("WIB-7", "Asia", "Jakarta Pontianak"),
    ("WIT-9", "Asia", "Jayapura"),
    ("IST-2IDT,M3.4.4/26,M10.5.0", "Asia", "Jerusalem"),
    (_numeric(4, 30), "Asia", "Kabul"),
    ("PKT-5", "Asia", "Karachi"),
    (_numeric(5, 45), "Asia", "Kathmandu"),
    ("IST-5:30", "Asia", "Kolkata"),
    ("CST-8", "Asia", "Macau Shanghai Taipei"),
    (_numeric(11), "Asia", "Magadan Sakhalin Srednekolymsk"),
    (_numeric(11), "Pacific", "Bougainville Efate Guadalcanal Kosrae Noumea Pohnpei"),
    ("WITA-8", "Asia", "Makassar"),
    ("PST-8", "Asia", "Manila"),
    ("KST-9", "Asia", "Pyongyang Seoul"),
    (_numeric(3, 30), "Asia", "Tehran"),
    ("JST-9", "Asia", "Tokyo"),
    (_numeric(6, 30), "Asia", "Yangon"),
    (_numeric(6, 30), "Indian", "Cocos"),
    ("<-01>1<+00>,M3.5.0/0,M10.5.0/1", "Atlantic", "Azores"),
    (f"WET0WEST,{_EU_WET}", "Atlantic", "Canary Faroe Madeira"),
    (f"WET0WEST,{_EU_WET}", "Europe", "Lisbon"),
    (_numeric(-1), "Atlantic", "Cape_Verde"),
    (f"ACST-9:30ACDT,{_AU}", "Australia", "Adelaide Broken_Hill"),
    ("AEST-10", "Australia", "Brisbane Lindeman"),
    ("ACST-9:30", "Australia", "Darwin"),
    (_numeric(8, 45), "Australia", "Eucla"),
    ("<+1030>-10:30<+11>-11,M10.1.0,M4.1.0", "Australia", "Lord_Howe"),
    ("AWST-8", "Australia", "Perth"),
    (f"EET-2EEST,{_EU_CET}", "Europe", "Chisinau"),
    ("IST-1GMT0,M10.5.0,M3.5.0/1", "Europe", "Dublin"),
    (f"GMT0BST,{_EU_WET}", "Europe", "Guernsey Isle_of_Man Jersey London"),
    ("MSK-3", "Europe", "Kirov Moscow Simferopol Volgograd"),
    (_numeric(13), "Pacific", "Apia Enderbury Fakaofo Tongatapu"),
    ("<+1245>-12:45<+1345>,M9.5.0/2:45,M4.1.0/3:45", "Pacific", "Chatham"),
    ("<-06>6<-05>,M9.1.6/22,M4.1.6/22", "Pacific", "Easter"),
    (_numeric(-6), "Pacific", "Galapagos"),
    (_numeric(-9), "Pacific", "Gambier"),
    ("ChST-10", "Pacific", "Guam Saipan"),
    ("HST10", "Pacific", "Honolulu"),
    (_numeric(14), "Pacific", "Kiritimati"),
    (_numeric(-9, 30), "Pacific", "Marquesas"),
    ("SST11", "Pacific", "Midway Pago_Pago"),
    (_numeric(-11), "Pacific", "Niue"),
    ("<+11>-11<+12>,M10.1.0,M4.1.0/3", "Pacific", "Norfolk"),
    (_numeric(-8), "Pacific", "Pitcairn"),
    (_numeric(-10), "Pacific", "Rarotonga Tahiti"),
)


def _build_table() -> dict[str, str]:
    table: dict[str, str] = {}
    for posix, region, cities in _GROUPS:
        for city in cities.split():
            table[f"{region}/{city}"] = posix
    # Etc/GMT-N lies N hours east of UTC, Etc/GMT+N N hours west.
    for hours in range(1, 15):
        table[f"Etc/GMT-{hours}"] = _numeric(hours)
    for hours in range(1, 13):
        table[f"Etc/GMT+{hours}"] = _numeric(-hours)
    return table


IANA_TO_POSIX: Mapping[str, str] = MappingProxyType(_build_table())


def posix_timezone(iana_name: str, default: str = DEFAULT_POSIX_TIMEZONE) -> str:
    """Return the POSIX TZ string for an IANA zone name, or ``default`` if unknown."""
    return IANA_TO_POSIX.get(iana_name, default)