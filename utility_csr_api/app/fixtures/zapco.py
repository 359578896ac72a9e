"""ZapCo Electric: customers and bills in ZapCo's own column names."""

ZAPCO_CUSTOMERS = (
    {
        "customer_id": "ZC-001",
        "account_number": "87234-HTG-2019",
        "first_name": "Bartholomew",
        "last_name": "Skittles",
        "phone": "503-555-ZAPS",
        "email": "bart.skittles1987@hotmail.com",
        "service_address": "1313 Mockingbird Lane",
        "city": "Portland",
        "state": "OR",
        "zip": "97201",
        "enrollment_date": "2019-03-15",
        "account_status": "active",
        "autopay_enrolled": False,
        "paperless_billing": False,
        "preferred_contact": "phone",
        "vip_tier": "uranium",
        "customer_notes": (
            "Has been with us since we were 'BoltCorp'. Insists on calling customer service to pay "
            "bill in person via phone. Believes digital payments steal your 'energy signature'. "
            "VIP because he once saved a technician from a raccoon."
        ),
        "current_balance": 234.56,
        "last_payment_date": "2024-10-28",
        "last_payment_amount": 198.43,
    },
    {
        "customer_id": "ZC-002",
        "account_number": "92847-PLM-2021",
        "first_name": "Crystal",
        "last_name": "Metheny",
        "phone": "971-555-0420",
        "email": "definitely.not.suspicious@protonmail.com",
        "service_address": "420 High Street, Unit B",
        "city": "Portland",
        "state": "OR",
        "zip": "97214",
        "enrollment_date": "2021-04-20",
        "account_status": "active",
        "autopay_enrolled": True,
        "paperless_billing": True,
        "preferred_contact": "text",
        "vip_tier": "none",
        "customer_notes": (
            "Usage patterns suggest either a server farm or... something else. We investigated. "
            "It's tomatoes. A LOT of tomatoes. Indoor hydroponic setup. Actually a data scientist."
        ),
        "current_balance": 0,
        "last_payment_date": "2024-11-30",
        "last_payment_amount": 892.17,
    },
    {
        "customer_id": "ZC-003",
        "account_number": "10483-VVR-1998",
        "first_name": "Gertrude",
        "last_name": "Pumpernickel",
        "phone": "503-555-GERT",
        "email": "g.pumpernickel@aol.com",
        "service_address": "742 Evergreen Terrace",
        "city": "Beaverton",
        "state": "OR",
        "zip": "97005",
        "enrollment_date": "1998-06-12",
        "account_status": "active",
        "autopay_enrolled": False,
        "paperless_billing": False,
        "preferred_contact": "phone",
        "vip_tier": "gold",
        "customer_notes": (
            "Calls every Tuesday at 2:47 PM. Has been for 26 years. She doesn't really have "
            "questions. Just wants to chat. Once paid her bill with a check written on a paper bag."
        ),
        "current_balance": 127.89,
        "last_payment_date": "2024-11-05",
        "last_payment_amount": 134.22,
    },
    {
        "customer_id": "ZC-004",
        "account_number": "55512-KKT-2023",
        "first_name": "Luna",
        "last_name": "Starbeam-Rodriguez",
        "phone": "971-555-MOON",
        "email": "luna.starbeam@ethereal.co",
        "service_address": "888 Chakra Boulevard, Apt 7",
        "city": "Portland",
        "state": "OR",
        "zip": "97202",
        "enrollment_date": "2023-02-14",
        "account_status": "suspended",
        "autopay_enrolled": False,
        "paperless_billing": True,
        "preferred_contact": "email",
        "vip_tier": "none",
        "customer_notes": (
            "Disputes bill every month based on astrological events. Service suspended after "
            "non-payment. Claims she can photosynthesize. Account shows she cannot."
        ),
        "current_balance": 1247.33,
        "last_payment_date": "2024-07-15",
        "last_payment_amount": 200.00,
    },
    {
        "customer_id": "ZC-005",
        "account_number": "77821-ABC-2020",
        "first_name": "Marcus",
        "last_name": "Unnecessarily-Long-Hyphenated-Name III",
        "phone": "503-555-NAME",
        "email": "the.third@legacy.com",
        "service_address": "1 Mansion Drive",
        "city": "Lake Oswego",
        "state": "OR",
        "zip": "97034",
        "enrollment_date": "2020-01-01",
        "account_status": "active",
        "autopay_enrolled": True,
        "paperless_billing": True,
        "preferred_contact": "carrier_pigeon",
        "vip_tier": "platinum",
        "customer_notes": (
            "Literally asked if we could accommodate carrier pigeon. We said yes as a joke. He sent "
            "one. We now have a pigeon coop. Has underground bunker that uses more power than his house."
        ),
        "current_balance": 0,
        "last_payment_date": "2024-12-01",
        "last_payment_amount": 3247.82,
    },
    {
        "customer_id": "ZC-006",
        "account_number": "33929-ZZX-2022",
        "first_name": "Robert",
        "last_name": "Tables",
        "phone": "503-555-DROP",
        "email": "bobby@tables.dev",
        "service_address": "404 Not Found Street",
        "city": "Tigard",
        "state": "OR",
        "zip": "97223",
        "enrollment_date": "2022-05-18",
        "account_status": "active",
        "autopay_enrolled": True,
        "paperless_billing": True,
        "preferred_contact": "email",
        "vip_tier": "none",
        "customer_notes": (
            "Parents named him Robert Tables. Tried SQL injection on our payment portal. Didn't "
            "work. Actually works in cybersecurity. Has helped us patch 3 vulnerabilities."
        ),
        "current_balance": 0,
        "last_payment_date": "2024-11-29",
        "last_payment_amount": 87.43,
    },
)


def _history_bill(bill_id, month, start, end, bill_date, due, amount, kwh, reading_start, status, paid_date=None):
    # Older ZC-001 cycles; the charge breakdown is illustrative.
    bill = {
        "bill_id": bill_id,
        "customer_id": "ZC-001",
        "account_number": "87234-HTG-2019",
        "billing_period_start": start,
        "billing_period_end": end,
        "bill_date": bill_date,
        "due_date": due,
        "total_amount_due": amount,
        "previous_balance": 0,
        "current_charges": amount,
        "late_fees": 0,
        "kwh_used": kwh,
        "kwh_rate": 0.142,
        "delivery_charge": 12.00,
        "utility_tax": round(amount * 0.08, 2),
        "renewable_energy_credit": -2.50,
        "peak_usage_surcharge": 0,
        "payment_status": status,
        "meter_number": "MTR-87234-A",
        "meter_reading_start": reading_start,
        "meter_reading_end": reading_start + kwh,
        "estimated_reading": False,
        "weather_adjustment": 0,
        "special_notes": f"{month} cycle. Paid by phone, as always.",
    }
    if paid_date:
        bill["paid_date"] = paid_date
        bill["paid_amount"] = amount
    return bill


ZAPCO_BILLS = (
    {
        "bill_id": "ZB-2024-11-001",
        "customer_id": "ZC-001",
        "account_number": "87234-HTG-2019",
        "billing_period_start": "2024-10-01",
        "billing_period_end": "2024-10-31",
        "bill_date": "2024-11-01",
        "due_date": "2024-11-25",
        "total_amount_due": 234.56,
        "previous_balance": 0,
        "current_charges": 234.56,
        "late_fees": 0,
        "kwh_used": 1247,
        "kwh_rate": 0.142,
        "delivery_charge": 12.00,
        "utility_tax": 18.74,
        "renewable_energy_credit": -2.50,
        "peak_usage_surcharge": 29.20,
        "payment_status": "unpaid",
        "meter_number": "MTR-87234-A",
        "meter_reading_start": 842134,
        "meter_reading_end": 843381,
        "estimated_reading": False,
        "weather_adjustment": 0,
        "special_notes": (
            "Usage up 23% from last month. Space heater season has begun. Customer called to ask "
            "if we could 'make the electrons warmer'. Bless him."
        ),
    },
    _history_bill("ZB-2024-10-001", "September", "2024-09-01", "2024-09-30", "2024-10-01", "2024-10-25",
                  198.43, 1014, 841120, "paid", "2024-10-28"),
    _history_bill("ZB-2024-09-001", "August", "2024-08-01", "2024-08-31", "2024-09-01", "2024-09-25",
                  171.02, 861, 840259, "paid", "2024-09-24"),
    _history_bill("ZB-2024-08-001", "July", "2024-07-01", "2024-07-31", "2024-08-01", "2024-08-25",
                  159.31, 798, 839461, "paid", "2024-08-23"),
    _history_bill("ZB-2024-07-001", "June", "2024-06-01", "2024-06-30", "2024-07-01", "2024-07-25",
                  147.22, 720, 838741, "paid", "2024-07-22"),
    _history_bill("ZB-2024-06-001", "May", "2024-05-01", "2024-05-31", "2024-06-01", "2024-06-25",
                  137.98, 655, 838086, "paid", "2024-06-21"),
    _history_bill("ZB-2024-05-001", "April", "2024-04-01", "2024-04-30", "2024-05-01", "2024-05-25",
                  144.61, 702, 837384, "paid", "2024-05-20"),
    {
        "bill_id": "ZB-2024-11-002",
        "customer_id": "ZC-002",
        "account_number": "92847-PLM-2021",
        "billing_period_start": "2024-10-01",
        "billing_period_end": "2024-10-31",
        "bill_date": "2024-11-01",
        "due_date": "2024-11-25",
        "total_amount_due": 892.17,
        "previous_balance": 0,
        "current_charges": 892.17,
        "late_fees": 0,
        "kwh_used": 6234,
        "kwh_rate": 0.142,
        "delivery_charge": 12.00,
        "utility_tax": 71.37,
        "renewable_energy_credit": -10.00,
        "peak_usage_surcharge": 0,
        "payment_status": "paid",
        "paid_date": "2024-11-30",
        "paid_amount": 892.17,
        "meter_number": "MTR-92847-S",
        "meter_reading_start": 234822,
        "meter_reading_end": 241056,
        "estimated_reading": False,
        "weather_adjustment": 0,
        "special_notes": "Consistent high usage. Tomato crop must be thriving. Cherry heirlooms.",
    },
    {
        "bill_id": "ZB-2024-07-004",
        "customer_id": "ZC-004",
        "account_number": "55512-KKT-2023",
        "billing_period_start": "2024-06-01",
        "billing_period_end": "2024-06-30",
        "bill_date": "2024-07-01",
        "due_date": "2024-07-25",
        "total_amount_due": 247.33,
        "previous_balance": 0,
        "current_charges": 247.33,
        "late_fees": 75.00,
        "kwh_used": 1389,
        "kwh_rate": 0.142,
        "delivery_charge": 12.00,
        "utility_tax": 19.78,
        "renewable_energy_credit": -2.50,
        "peak_usage_surcharge": 0,
        "payment_status": "disputed",
        "meter_number": "MTR-55512-S",
        "meter_reading_start": 45822,
        "meter_reading_end": 47211,
        "estimated_reading": False,
        "weather_adjustment": 0,
        "special_notes": (
            "Customer disputes charge. Claims Mercury was in retrograde during billing period. "
            "Meter reading verified by two separate technicians. Dispute denied."
        ),
    },
    {
        "bill_id": "ZB-2024-11-005",
        "customer_id": "ZC-005",
        "account_number": "77821-ABC-2020",
        "billing_period_start": "2024-10-01",
        "billing_period_end": "2024-10-31",
        "bill_date": "2024-11-01",
        "due_date": "2024-11-25",
        "total_amount_due": 3247.82,
        "previous_balance": 0,
        "current_charges": 3247.82,
        "late_fees": 0,
        "kwh_used": 22847,
        "kwh_rate": 0.142,
        "delivery_charge": 45.00,
        "utility_tax": 259.83,
        "renewable_energy_credit": -50.00,
        "peak_usage_surcharge": 0,
        "payment_status": "paid",
        "paid_date": "2024-12-01",
        "paid_amount": 3247.82,
        "meter_number": "MTR-77821-P",
        "meter_reading_start": 892341,
        "meter_reading_end": 915188,
        "estimated_reading": False,
        "weather_adjustment": 0,
        "special_notes": (
            "Two meters on property. House uses 2847 kWh. 'Underground facility' uses 20,000 kWh. "
            "We don't ask questions. Payment always on time."
        ),
    },
)
