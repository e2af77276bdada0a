"""Portal constants: form names, document-type filters and lookup tables."""

# Document-type filters (the `nres` query argument)
DOCUMENT_FILTER_LAW = 1  # Love/Lovbekendtgørelser
DOCUMENT_FILTER_ANNOUNCEMENT = 2  # Bekendtgørelser m.v.
DOCUMENT_FILTER_MANUALS = 3  # Cirkulærer, vejledninger m.v.
DOCUMENT_FILTER_DECISIONS = 4  # Afgørelser
DOCUMENT_FILTER_PROPOSALS = 5  # Lovforslag i nuværende Folketingssamling
DOCUMENT_FILTER_LATEST = 6  # Seneste dokumenter

DOCUMENT_FILTERS = (
    DOCUMENT_FILTER_LAW,
    DOCUMENT_FILTER_ANNOUNCEMENT,
    DOCUMENT_FILTER_MANUALS,
    DOCUMENT_FILTER_DECISIONS,
    DOCUMENT_FILTER_PROPOSALS,
    DOCUMENT_FILTER_LATEST,
)

FORM_MINISTRIES = "R0300.aspx"
FORM_MINISTRY = "R0310.aspx"
FORM_DOCUMENT = "R0710.aspx"

MAX_DOCUMENTS_PER_PAGE = 50

BODY_BOX_SELECTOR = "div.bodyBox"
DOCUMENT_BODY_SELECTOR = "div#ctl00_MainContent_Broedtekst1"

DANISH_MONTH_ABBREVIATIONS = {
    "jan": 1,
    "feb": 2,
    "mar": 3,
    "apr": 4,
    "maj": 5,
    "jun": 6,
    "jul": 7,
    "aug": 8,
    "sep": 9,
    "okt": 10,
    "nov": 11,
    "dec": 12,
}
