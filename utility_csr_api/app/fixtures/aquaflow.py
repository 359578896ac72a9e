"""AquaFlow Municipal Water: customers and bills in AquaFlow's own column names."""

AQUAFLOW_CUSTOMERS = (
    {
        "customer_id": "AF-1001",
        "account_number": "AQF-1998-MTB-7721",
        "full_name": "Margaret 'Marge' Thunderbottom",
        "contact_phone": "541-555-FLOW",
        "contact_email": "marge.t@thunderbottomfamily.com",
        "service_location": "2847 Rain Dance Road",
        "city": "Eugene",
        "state": "OR",
        "postal_code": "97401",
        "account_opened": "1998-03-22",
        "account_type": "residential",
        "service_status": "active",
        "auto_payment": False,
        "emergency_contact_name": "Her 47 cats (collectively)",
        "emergency_contact_phone": "541-555-MEOW",
        "water_hardness_preference": "i_can_taste_the_minerals",
        "special_instructions": (
            "DO NOT call before 10 AM or after 6 PM. Prefers postal mail. Makes her own soap from "
            "our water. It's actually pretty good."
        ),
        "current_balance": 67.43,
    },
    {
        "customer_id": "AF-1002",
        "account_number": "AQF-2021-JCK-8821",
        "full_name": "Jackson 'Aquaman' Ripley",
        "contact_phone": "541-555-SWIM",
        "contact_email": "jripley@notaquaman.com",
        "service_location": "1515 Neptune Court",
        "city": "Springfield",
        "state": "OR",
        "postal_code": "97477",
        "account_opened": "2021-06-15",
        "account_type": "residential",
        "service_status": "flagged",
        "auto_payment": True,
        "emergency_contact_name": "Coral Ripley (sister)",
        "emergency_contact_phone": "541-555-REEF",
        "water_hardness_preference": "soft",
        "special_instructions": (
            "USAGE FLAGGED: Olympic-size swimming pool that was 'forgotten to be mentioned'. Not "
            "actually Aquaman. Just really likes water. Pays extra for water feature permit."
        ),
        "current_balance": 0,
    },
    {
        "customer_id": "AF-1003",
        "account_number": "AQF-2019-VGN-9247",
        "full_name": "Mx. River Stone",
        "contact_phone": "541-555-H2OH",
        "contact_email": "river.stone@flowstate.org",
        "service_location": "369 Meditation Lane, Unit C",
        "city": "Eugene",
        "state": "OR",
        "postal_code": "97402",
        "account_opened": "2019-11-11",
        "account_type": "residential",
        "service_status": "active",
        "auto_payment": True,
        "emergency_contact_name": "Breeze Stone (sibling)",
        "emergency_contact_phone": "541-555-WIND",
        "water_hardness_preference": "soft",
        "special_instructions": (
            "Requested pH reports for water (we provided). Practices water conservation, uses 40% "
            "less than average household. Sent us crystals 'for the treatment plant'."
        ),
        "current_balance": 0,
    },
    {
        "customer_id": "AF-1004",
        "account_number": "AQF-2020-HGS-3382",
        "full_name": "Dr. Hortense Gribbleflotz",
        "contact_phone": "541-555-LABS",
        "contact_email": "h.gribbleflotz@chemlab.edu",
        "service_location": "247 Science Boulevard, Lab 6",
        "city": "Eugene",
        "state": "OR",
        "postal_code": "97403",
        "account_opened": "2020-09-01",
        "account_type": "commercial",
        "service_status": "active",
        "auto_payment": True,
        "emergency_contact_name": "University Facilities",
        "emergency_contact_phone": "541-555-UNIV",
        "water_hardness_preference": "normal",
        "special_instructions": (
            "Chemistry professor. Once reported water tasted 'slightly more oxidized than usual'; "
            "our testing confirmed she was correct. Sends detailed water quality feedback monthly."
        ),
        "current_balance": 0,
    },
    {
        "customer_id": "AF-1005",
        "account_number": "AQF-2023-BRK-1144",
        "full_name": "Bartholomew 'Bart' Leakyson",
        "contact_phone": "541-555-DRIP",
        "contact_email": "bart.leakyson@fixitpro.com",
        "service_location": "8822 Old Pipe Drive",
        "city": "Cottage Grove",
        "state": "OR",
        "postal_code": "97424",
        "account_opened": "2023-02-14",
        "account_type": "residential",
        "service_status": "active",
        "auto_payment": False,
        "emergency_contact_name": "Diane Leakyson (wife, long-suffering)",
        "emergency_contact_phone": "541-555-HELP",
        "water_hardness_preference": "crunchy",
        "special_instructions": (
            "Irony alert: Customer is a plumber. Customer's house had a foundation leak. He fixed "
            "it. Couple sends us Christmas cookies now. They're terrible. We eat them anyway."
        ),
        "current_balance": 234.88,
    },
)

AQUAFLOW_BILLS = (
    {
        "bill_id": "AFB-2024-11-1001",
        "customer_id": "AF-1001",
        "account_number": "AQF-1998-MTB-7721",
        "statement_date": "2024-11-01",
        "due_date": "2024-12-01",
        "billing_start": "2024-10-01",
        "billing_end": "2024-10-31",
        "total_charges": 67.43,
        "previous_balance": 0,
        "payments_received": 0,
        "water_usage_gallons": 4200,
        "water_rate_per_1000gal": 4.85,
        "base_service_fee": 22.00,
        "sewer_charge": 18.70,
        "stormwater_fee": 3.25,
        "infrastructure_surcharge": 2.10,
        "late_payment_fee": 0,
        "meter_reading_current": 2847293,
        "meter_reading_previous": 2843093,
        "meter_number": "AFM-7721-R",
        "leak_detected": False,
        "usage_anomaly": False,
        "payment_status": "current",
        "conservation_credit": -2.00,
        "status_notes": "Consistent usage. Customer asked if we could make the water 'taste more like 1998'.",
    },
    {
        "bill_id": "AFB-2024-10-1002",
        "customer_id": "AF-1002",
        "account_number": "AQF-2021-JCK-8821",
        "statement_date": "2024-10-01",
        "due_date": "2024-11-01",
        "billing_start": "2024-09-01",
        "billing_end": "2024-09-30",
        "total_charges": 847.32,
        "previous_balance": 0,
        "payments_received": 847.32,
        "water_usage_gallons": 152400,
        "water_rate_per_1000gal": 4.85,
        "base_service_fee": 45.00,
        "sewer_charge": 78.00,
        "stormwater_fee": 12.50,
        "infrastructure_surcharge": 18.75,
        "late_payment_fee": 0,
        "meter_reading_current": 4827471,
        "meter_reading_previous": 4675071,
        "meter_number": "AFM-8821-P",
        "leak_detected": False,
        "usage_anomaly": True,
        "anomaly_notes": "High usage verified as Olympic pool + water features. Customer winterizing pool.",
        "payment_status": "paid",
        "conservation_credit": 0,
        "status_notes": "Customer paid extra $200 annual water feature permit. All legitimate.",
    },
    {
        "bill_id": "AFB-2024-11-1003",
        "customer_id": "AF-1003",
        "account_number": "AQF-2019-VGN-9247",
        "statement_date": "2024-11-01",
        "due_date": "2024-12-01",
        "billing_start": "2024-10-01",
        "billing_end": "2024-10-31",
        "total_charges": 38.92,
        "previous_balance": 0,
        "payments_received": 0,
        "water_usage_gallons": 2100,
        "water_rate_per_1000gal": 4.85,
        "base_service_fee": 22.00,
        "sewer_charge": 9.35,
        "stormwater_fee": 3.25,
        "infrastructure_surcharge": 2.10,
        "late_payment_fee": 0,
        "meter_reading_current": 147821,
        "meter_reading_previous": 145721,
        "meter_number": "AFM-9247-S",
        "leak_detected": False,
        "usage_anomaly": False,
        "payment_status": "current",
        "conservation_credit": -5.00,
        "status_notes": "Excellent conservation! Usage 40% below average. Collects rainwater for plants.",
    },
    {
        "bill_id": "AFB-2024-10-1003",
        "customer_id": "AF-1003",
        "account_number": "AQF-2019-VGN-9247",
        "statement_date": "2024-10-01",
        "due_date": "2024-11-01",
        "billing_start": "2024-09-01",
        "billing_end": "2024-09-30",
        "total_charges": 40.38,
        "previous_balance": 0,
        "payments_received": 40.38,
        "water_usage_gallons": 2400,
        "water_rate_per_1000gal": 4.85,
        "base_service_fee": 22.00,
        "sewer_charge": 9.35,
        "stormwater_fee": 3.25,
        "infrastructure_surcharge": 2.10,
        "late_payment_fee": 0,
        "meter_reading_current": 145721,
        "meter_reading_previous": 143321,
        "meter_number": "AFM-9247-S",
        "leak_detected": False,
        "usage_anomaly": False,
        "payment_status": "paid",
        "conservation_credit": -5.00,
        "status_notes": "Low-flow everything.",
    },
    {
        "bill_id": "AFB-2024-09-1003",
        "customer_id": "AF-1003",
        "account_number": "AQF-2019-VGN-9247",
        "statement_date": "2024-09-01",
        "due_date": "2024-10-01",
        "billing_start": "2024-08-01",
        "billing_end": "2024-08-31",
        "total_charges": 41.35,
        "previous_balance": 0,
        "payments_received": 41.35,
        "water_usage_gallons": 2600,
        "water_rate_per_1000gal": 4.85,
        "base_service_fee": 22.00,
        "sewer_charge": 9.35,
        "stormwater_fee": 3.25,
        "infrastructure_surcharge": 2.10,
        "late_payment_fee": 0,
        "meter_reading_current": 143321,
        "meter_reading_previous": 140721,
        "meter_number": "AFM-9247-S",
        "leak_detected": False,
        "usage_anomaly": False,
        "payment_status": "paid",
        "conservation_credit": -5.00,
        "status_notes": "Summer garden watering from the rain barrel ran dry for a week.",
    },
    {
        "bill_id": "AFB-2024-09-1005",
        "customer_id": "AF-1005",
        "account_number": "AQF-2023-BRK-1144",
        "statement_date": "2024-09-01",
        "due_date": "2024-10-01",
        "billing_start": "2024-08-01",
        "billing_end": "2024-08-31",
        "total_charges": 234.88,
        "previous_balance": 0,
        "payments_received": 0,
        "water_usage_gallons": 38400,
        "water_rate_per_1000gal": 4.85,
        "base_service_fee": 22.00,
        "sewer_charge": 31.20,
        "stormwater_fee": 3.25,
        "infrastructure_surcharge": 4.80,
        "late_payment_fee": 15.00,
        "meter_reading_current": 982447,
        "meter_reading_previous": 944047,
        "meter_number": "AFM-1144-L",
        "leak_detected": True,
        "leak_description": "Suspected foundation leak. Usage 400% above normal. Leak now repaired.",
        "usage_anomaly": True,
        "anomaly_notes": "THE IRONY. Plumber has leak. Foundation leak discovered and repaired.",
        "payment_status": "overdue",
        "conservation_credit": 0,
        "status_notes": "Overdue but customer called, explained leak repair costs. Set up payment plan.",
    },
)
