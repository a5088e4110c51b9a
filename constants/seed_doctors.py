# Sample profiles inserted by POST /api/seed-doctors
SAMPLE_DOCTORS = [
    {
        "name": "Liritha C",
        "specialty": "General Physician/ Internal Medicine Specialist",
        "qualification": "MBBS, MD (GENERAL MEDICINE)",
        "experience": 5,
        "hospital": "Apollo 24|7 Virtual Clinic",
        "location": "Telangana, Hyderabad",
        "consultationFee": 429,
        "isDoctor": True,
        "languages": ["English", "Hindi", "Telugu"],
        "availableForOnlineConsult": True,
        "availableForHospitalVisit": True,
    },
    {
        "name": "Chandra Sekhar P",
        "specialty": "General Practitioner",
        "qualification": "MBBS",
        "experience": 5,
        "hospital": "Apollo 24|7 Virtual Clinic",
        "location": "Karnataka, Bangalore",
        "consultationFee": 399,
        "languages": ["English", "Kannada"],
        "availableForOnlineConsult": True,
        "availableForHospitalVisit": False,
    },
    {
        "name": "Lakshmi Sindhura Kakani",
        "specialty": "General Physician/ Internal Medicine Specialist",
        "qualification": "MBBS, MD (GENERAL MEDICINE)",
        "experience": 10,
        "hospital": "Apollo 24|7 Virtual Clinic",
        "location": "Delhi NCR",
        "consultationFee": 499,
        "languages": ["English", "Hindi"],
        "availableForOnlineConsult": True,
        "availableForHospitalVisit": True,
    },
    {
        "name": "Rahul Sharma",
        "specialty": "General Physician",
        "qualification": "MBBS, DNB",
        "experience": 8,
        "hospital": "Apollo 24|7 Virtual Clinic",
        "location": "Mumbai, Maharashtra",
        "consultationFee": 450,
        "languages": ["English", "Hindi", "Marathi"],
        "availableForOnlineConsult": True,
        "availableForHospitalVisit": True,
    },
    {
        "name": "Priya Patel",
        "specialty": "Internal Medicine",
        "qualification": "MBBS, MD",
        "experience": 7,
        "hospital": "Apollo 24|7 Virtual Clinic",
        "location": "Gujarat, Ahmedabad",
        "consultationFee": 350,
        "languages": ["English", "Hindi", "Gujarati"],
        "availableForOnlineConsult": True,
        "availableForHospitalVisit": False,
    },
]
