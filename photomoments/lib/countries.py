"""
Country keyword and display name tables.

COUNTRIES maps lowercase keywords, as they show up in folder and file names
after separator normalization, to ISO 3166-1 alpha-2 codes. English names
plus common native spellings and a few city names that are unambiguous.
"""

UNKNOWN_CODE = 'zz'

COUNTRIES = {
    # Europe
    'germany': 'de', 'deutschland': 'de', 'berlin': 'de', 'munich': 'de', 'münchen': 'de',
    'austria': 'at', 'österreich': 'at', 'vienna': 'at', 'wien': 'at',
    'switzerland': 'ch', 'schweiz': 'ch', 'suisse': 'ch', 'zurich': 'ch', 'zürich': 'ch',
    'lausanne': 'ch',
    'france': 'fr', 'paris': 'fr',
    'italy': 'it', 'italia': 'it', 'italien': 'it', 'venice': 'it',
    'perugia': 'it',
    'spain': 'es', 'españa': 'es', 'spanien': 'es', 'barcelona': 'es', 'madrid': 'es',
    'portugal': 'pt', 'lisbon': 'pt',
    'netherlands': 'nl', 'holland': 'nl', 'nederland': 'nl', 'amsterdam': 'nl',
    'belgium': 'be', 'belgië': 'be', 'belgique': 'be', 'brussels': 'be',
    'luxembourg': 'lu',
    'united kingdom': 'gb', 'great britain': 'gb', 'england': 'gb', 'scotland': 'gb',
    'wales': 'gb', 'london': 'gb',
    'ireland': 'ie', 'dublin': 'ie',
    'iceland': 'is', 'ísland': 'is',
    'denmark': 'dk', 'danmark': 'dk', 'copenhagen': 'dk',
    'norway': 'no', 'norge': 'no', 'oslo': 'no',
    'sweden': 'se', 'sverige': 'se', 'stockholm': 'se',
    'finland': 'fi', 'suomi': 'fi', 'helsinki': 'fi',
    'poland': 'pl', 'polska': 'pl', 'warsaw': 'pl',
    'czech republic': 'cz', 'czechia': 'cz', 'prague': 'cz',
    'slovakia': 'sk',
    'hungary': 'hu', 'budapest': 'hu',
    'croatia': 'hr', 'hrvatska': 'hr',
    'slovenia': 'si',
    'greece': 'gr', 'athens': 'gr',
    'turkey': 'tr', 'türkiye': 'tr', 'istanbul': 'tr',
    'romania': 'ro',
    'bulgaria': 'bg',
    'serbia': 'rs',
    'montenegro': 'me',
    'malta': 'mt',
    'cyprus': 'cy',
    'estonia': 'ee',
    'latvia': 'lv',
    'lithuania': 'lt',
    'ukraine': 'ua', 'kyiv': 'ua',
    'russia': 'ru', 'moscow': 'ru',
    # Americas
    'united states': 'us', 'new york': 'us', 'california': 'us',
    'san francisco': 'us', 'los angeles': 'us', 'hawaii': 'us',
    'canada': 'ca', 'vancouver': 'ca', 'toronto': 'ca',
    'mexico': 'mx', 'méxico': 'mx',
    'costa rica': 'cr',
    'brazil': 'br', 'brasil': 'br', 'rio de janeiro': 'br',
    'argentina': 'ar', 'buenos aires': 'ar',
    'chile': 'cl',
    'peru': 'pe',
    'colombia': 'co',
    'ecuador': 'ec', 'galapagos': 'ec',
    # Africa and Middle East
    'south africa': 'za', 'cape town': 'za',
    'egypt': 'eg', 'cairo': 'eg',
    'morocco': 'ma', 'marokko': 'ma',
    'tunisia': 'tn',
    'kenya': 'ke',
    'tanzania': 'tz', 'zanzibar': 'tz',
    'namibia': 'na',
    'israel': 'il', 'jerusalem': 'il',
    'jordan': 'jo',
    'united arab emirates': 'ae', 'dubai': 'ae',
    # Asia and Oceania
    'china': 'cn', 'beijing': 'cn', 'shanghai': 'cn',
    'hong kong': 'hk',
    'japan': 'jp', 'tokyo': 'jp', 'kyoto': 'jp',
    'south korea': 'kr', 'korea': 'kr', 'seoul': 'kr', 'busan': 'kr',
    'taiwan': 'tw',
    'thailand': 'th', 'bangkok': 'th',
    'vietnam': 'vn',
    'cambodia': 'kh',
    'indonesia': 'id', 'bali': 'id',
    'malaysia': 'my',
    'singapore': 'sg',
    'philippines': 'ph',
    'india': 'in',
    'sri lanka': 'lk',
    'nepal': 'np',
    'maldives': 'mv',
    'australia': 'au', 'sydney': 'au', 'melbourne': 'au',
    'new south wales': 'au',
    'new zealand': 'nz',
}

COUNTRY_NAMES = {
    'de': 'Germany', 'at': 'Austria', 'ch': 'Switzerland', 'fr': 'France', 'it': 'Italy',
    'es': 'Spain', 'pt': 'Portugal', 'nl': 'Netherlands', 'be': 'Belgium', 'lu': 'Luxembourg',
    'gb': 'United Kingdom', 'ie': 'Ireland', 'is': 'Iceland', 'dk': 'Denmark', 'no': 'Norway',
    'se': 'Sweden', 'fi': 'Finland', 'pl': 'Poland', 'cz': 'Czech Republic', 'sk': 'Slovakia',
    'hu': 'Hungary', 'hr': 'Croatia', 'si': 'Slovenia', 'gr': 'Greece', 'tr': 'Turkey',
    'ro': 'Romania', 'bg': 'Bulgaria', 'rs': 'Serbia', 'me': 'Montenegro', 'mt': 'Malta',
    'cy': 'Cyprus', 'ee': 'Estonia', 'lv': 'Latvia', 'lt': 'Lithuania', 'ua': 'Ukraine',
    'ru': 'Russia', 'us': 'USA', 'ca': 'Canada', 'mx': 'Mexico',
    'cr': 'Costa Rica', 'br': 'Brazil', 'ar': 'Argentina', 'cl': 'Chile', 'pe': 'Peru',
    'co': 'Colombia', 'ec': 'Ecuador', 'za': 'South Africa', 'eg': 'Egypt', 'ma': 'Morocco',
    'tn': 'Tunisia', 'ke': 'Kenya', 'tz': 'Tanzania', 'na': 'Namibia', 'il': 'Israel',
    'jo': 'Jordan', 'ae': 'United Arab Emirates', 'cn': 'China', 'hk': 'Hong Kong',
    'jp': 'Japan', 'kr': 'South Korea', 'tw': 'Taiwan', 'th': 'Thailand', 'vn': 'Vietnam',
    'kh': 'Cambodia', 'id': 'Indonesia', 'my': 'Malaysia', 'sg': 'Singapore',
    'ph': 'Philippines', 'in': 'India', 'lk': 'Sri Lanka', 'np': 'Nepal', 'mv': 'Maldives',
    'au': 'Australia', 'nz': 'New Zealand',
}


def country_name(code: str) -> str:
    """
    Return the English display name for a country code.

    Unmapped codes are shown upper-cased, the unknown code as 'Unknown'.
    """
    code = (code or '').lower()
    if not code or code == UNKNOWN_CODE:
        return 'Unknown'
    return COUNTRY_NAMES.get(code, code.upper())
