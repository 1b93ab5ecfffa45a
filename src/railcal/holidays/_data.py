# UK (England & Wales) bank holidays, resolved per calendar year.
# Source: gov.uk bank-holidays feed. Extend when new years are published.
UK_BANK_HOLIDAYS: dict[int, list[dict[str, str]]] = {
    2023: [
        {"date": "2023-01-02", "name": "New Year's Day (substitute)"},
        {"date": "2023-04-07", "name": "Good Friday"},
        {"date": "2023-04-10", "name": "Easter Monday"},
        {"date": "2023-05-01", "name": "Early May Bank Holiday"},
        {"date": "2023-05-08", "name": "Coronation Bank Holiday"},
        {"date": "2023-05-29", "name": "Spring Bank Holiday"},
        {"date": "2023-08-28", "name": "Summer Bank Holiday"},
        {"date": "2023-12-25", "name": "Christmas Day"},
        {"date": "2023-12-26", "name": "Boxing Day"},
    ],
    2024: [
        {"date": "2024-01-01", "name": "New Year's Day"},
        {"date": "2024-03-29", "name": "Good Friday"},
        {"date": "2024-04-01", "name": "Easter Monday"},
        {"date": "2024-05-06", "name": "Early May Bank Holiday"},
        {"date": "2024-05-27", "name": "Spring Bank Holiday"},
        {"date": "2024-08-26", "name": "Summer Bank Holiday"},
        {"date": "2024-12-25", "name": "Christmas Day"},
        {"date": "2024-12-26", "name": "Boxing Day"},
    ],
    2025: [
        {"date": "2025-01-01", "name": "New Year's Day"},
        {"date": "2025-04-18", "name": "Good Friday"},
        {"date": "2025-04-21", "name": "Easter Monday"},
        {"date": "2025-05-05", "name": "Early May Bank Holiday"},
        {"date": "2025-05-26", "name": "Spring Bank Holiday"},
        {"date": "2025-08-25", "name": "Summer Bank Holiday"},
        {"date": "2025-12-25", "name": "Christmas Day"},
        {"date": "2025-12-26", "name": "Boxing Day"},
    ],
    2026: [
        {"date": "2026-01-01", "name": "New Year's Day"},
        {"date": "2026-04-03", "name": "Good Friday"},
        {"date": "2026-04-06", "name": "Easter Monday"},
        {"date": "2026-05-04", "name": "Early May Bank Holiday"},
        {"date": "2026-05-25", "name": "Spring Bank Holiday"},
        {"date": "2026-08-31", "name": "Summer Bank Holiday"},
        {"date": "2026-12-25", "name": "Christmas Day"},
        {"date": "2026-12-28", "name": "Boxing Day (substitute)"},
    ],
    2027: [
        {"date": "2027-01-01", "name": "New Year's Day"},
        {"date": "2027-03-26", "name": "Good Friday"},
        {"date": "2027-03-29", "name": "Easter Monday"},
        {"date": "2027-05-03", "name": "Early May Bank Holiday"},
        {"date": "2027-05-31", "name": "Spring Bank Holiday"},
        {"date": "2027-08-30", "name": "Summer Bank Holiday"},
        {"date": "2027-12-27", "name": "Christmas Day (substitute)"},
        {"date": "2027-12-28", "name": "Boxing Day (substitute)"},
    ],
}
