"""Translation cases for the Singlish-to-Sinhala translator.

Positive cases list substrings that must all appear in the output.
Negative cases pin the exact (wrong) transliteration the site produces.
"""

from models import TranslationCase as Case

POSITIVE_CASES = [
    Case("Pos_Fun_0001", "Convert short daily greeting", "suba udhaeesanak", ("සුබ උදෑසනක්",)),
    Case(
        "Pos_Fun_0002",
        "Convert mixed Singlish + English text",
        "api heta Kandy yanna hadhanavaa, train reservation ekak kalin karanna oone machan. "
        "Hotel booking ekak Booking.com eken karagamu, WiFi saha parking thiyenavaa.",
        ("අපි හෙට Kandy යන්න හදනවා", "train reservation", "WiFi"),
    ),
    Case("Pos_Fun_0003", "Convert short request phrase", "karuNaakara vathura ekak dhenna", ("කරුණාකර වතුර එකක් දෙන්න",)),
    Case("Pos_Fun_0004", "Simple sentence with proper spacing", "mama gedhara yanavaa.", ("මම ගෙදර යනවා.",)),
    Case("Pos_Fun_0005", "Joined words without spaces", "mamagedharayanavaa", ("මමගෙදරයනවා",)),
    Case(
        "Pos_Fun_0006",
        "Compound sentence",
        "mama gedhara yanavaa, haebaeyi vahina nisaa dhaenma yannee naee.",
        ("මම ගෙදර යනවා, හැබැයි වහින නිසා දැන්ම යන්නේ නෑ.",),
    ),
    Case("Pos_Fun_0007", "Complex sentence with condition", "oya enavaanam mama balan innavaa.", ("ඔය එනවානම් මම බලන් ඉන්නවා.",)),
    Case("Pos_Fun_0008", "Imperative command", "vahaama enna.", ("වහාම එන්න.",)),
    Case("Pos_Fun_0009", "Negative sentence form", "mama ehema karannee naehae.", ("මම එහෙම කරන්නේ නැහැ.",)),
    Case("Pos_Fun_0010", "Greeting phrase with exclamation", "aayuboovan!", ("ආයුබෝවන්!",)),
    Case(
        "Pos_Fun_0011",
        "Polite request",
        "karuNaakaralaa mata podi udhavvak karanna puLuvandha?",
        ("කරුණාකරලා මට පොඩි උදව්වක් කරන්න පුළුවන්ද?",),
    ),
    Case("Pos_Fun_0012", "Informal phrasing", "eeyi, ooka dhiyan.", ("ඒයි, ඕක දියන්.",)),
    Case("Pos_Fun_0013", "Day-to-day expression", "mata nidhimathayi.", ("මට නිදිමතයි.",)),
    Case("Pos_Fun_0014", "Multi-word expression", "mata oona", ("මට ඕන",)),
    Case("Pos_Fun_0015", "Repeated words for emphasis", "hari hari", ("හරි හරි",)),
    Case("Pos_Fun_0016", "Past tense sentence", "mama iiyee gedhara giyaa.", ("මම ඊයේ ගෙදර ගියා.",)),
    Case("Pos_Fun_0017", "Future tense sentence", "mama heta enavaa", ("මම හෙට එනවා",)),
    Case("Pos_Fun_0018", "Singular pronoun usage", "mama yanna hadhannee.", ("මම යන්න හදන්නේ.",)),
    Case("Pos_Fun_0019", "Plural pronoun usage", "api yamu.", ("අපි යමු.",)),
    Case(
        "Pos_Fun_0020",
        "Request with varying politeness",
        "karuNaakara eeka mata adha dhenavadha?",
        ("කරුණාකර ඒක මට අද දෙනවද?",),
    ),
    Case("Pos_Fun_0021", "English technical term embedded", "Zoom meeting ekak thiyennee.", ("Zoom meeting එකක් තියෙන්නේ.",)),
    Case("Pos_Fun_0022", "Place name in sentence", "siiyaa Colombo yanna hadhannee.", ("සීයා Colombo යන්න හදන්නේ.",)),
    Case("Pos_Fun_0023", "English abbreviation", "ID eka genna", ("ID එක ගෙන්න",)),
    Case("Pos_Fun_0024", "Short sentence with English abbreviation", "OTP eka SMS ekak evanna", ("OTP එක SMS එකක් එවන්න",)),
]

NEGATIVE_CASES = [
    Case("Neg_Fun_0001", 'Chat-style shorthand "Thx" not converted', "Thx machan!", "ථx මචන්!"),
    Case("Neg_Fun_0002", 'English short form "u" instead of "you"', "u enne?", "උ එන්නෙ?"),
    Case("Neg_Fun_0003", 'Numeric shorthand "gr8" for "great"', "eeka gr8!", "ඒක gr8!"),
    Case("Neg_Fun_0004", "Mixed case Singlish input", "OyaaTa KohoMadha?", "ඔයාඨ ඛොහොමද?"),
    Case("Neg_Fun_0005", "Misspelled common Singlish phrase", "oyata komada?", "ඔයට කොමඩ?"),
    Case("Neg_Fun_0006", "Misspelled shorthand with repeated letters", "thxzzz bro", "තxzzz bro"),
    Case("Neg_Fun_0007", "Excessive character repetition", "haiiiiii", "හෛඊඊඉ"),
    Case("Neg_Fun_0008", "Incomplete Singlish word", "karann puLuvan", "කරන්න් පුළුවන්"),
    Case(
        "Neg_Fun_0009",
        "Mixed language gibberish",
        "hello machan kohomada thing stuff work please thanks",
        "hello මචන් කොහොමඩ thing stuff work please thanks",
    ),
    Case(
        "Neg_Fun_0010",
        "Extremely long joined word stress test",
        "hello kohomada oyata enne monawada mama yanne na enna epa oyata dhanne na epa hariyata yanna epa",
        "hello කොහොමඩ ඔයට එන්නෙ මොනwඅඩ මම යන්නෙ න එන්න එප ඔයට දන්නෙ න එප හරියට යන්න එප",
    ),
]

# (id, description, first text, second text)
UI_CASES = [
    ("Pos_UI_0001", "Clear input button functionality", "mama gedhara yanavaa", "api yamu"),
]

SUITES = {
    "positive": POSITIVE_CASES,
    "negative": NEGATIVE_CASES,
}


def find_case(case_id: str) -> Case | None:
    for cases in SUITES.values():
        for case in cases:
            if case.id == case_id:
                return case
    return None
