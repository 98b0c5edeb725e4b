"""Canned publication records served by the metadata catalog."""

SPECIFICATION_RECORDS = {
    "TS 32.290": {
        "title": "5G system; Services, operations and procedures of charging using Service Based Interface (SBI)",
        "version": "17.1.0",
        "release": "Rel-17",
        "working_group": "SA5",
        "status": "Published",
        "publication_date": "2023-04-01",
        "summary": (
            "This specification defines the converged charging system for 5G networks using Service "
            "Based Interface (SBI) architecture. It specifies the Charging Function (CHF) operations, "
            "procedures, and interfaces for both online and offline charging scenarios."
        ),
        "dependencies": ["TS 23.501", "TS 23.502", "TS 32.240", "TS 32.255"],
        "keywords": ["charging", "chf", "service-based", "5g", "converged", "sbi", "nchf"],
    },
    "TS 32.240": {
        "title": "Telecommunication management; Charging management; Charging architecture and principles",
        "version": "17.0.0",
        "release": "Rel-17",
        "working_group": "SA5",
        "status": "Published",
        "publication_date": "2022-12-15",
        "summary": (
            "Defines the overall charging architecture and fundamental principles for 3GPP networks. "
            "Establishes the framework for online charging (OCS) and offline charging (CDF/CGF) systems."
        ),
        "dependencies": ["TS 23.203", "TS 32.251", "TS 32.255"],
        "keywords": ["charging", "architecture", "ocs", "cdf", "cgf", "principles"],
    },
    "TS 38.331": {
        "title": "5G; NR; Radio Resource Control (RRC); Protocol specification",
        "version": "17.4.0",
        "release": "Rel-17",
        "working_group": "RAN2",
        "status": "Published",
        "publication_date": "2023-06-01",
        "summary": (
            "Specifies the Radio Resource Control (RRC) protocol for 5G New Radio. Defines connection "
            "establishment, configuration, mobility management, and measurement procedures."
        ),
        "dependencies": ["TS 38.300", "TS 38.211", "TS 38.212", "TS 38.213"],
        "keywords": ["rrc", "5g", "nr", "radio", "mobility", "handover", "connection"],
    },
    "TS 33.501": {
        "title": "Security architecture and procedures for 5G System",
        "version": "17.6.0",
        "release": "Rel-17",
        "working_group": "SA3",
        "status": "Published",
        "publication_date": "2023-07-01",
        "summary": (
            "Comprehensive security architecture for 5G systems including authentication, key "
            "management, privacy protection, and security procedures for service-based architecture."
        ),
        "dependencies": ["TS 23.501", "TS 23.502", "TS 33.220"],
        "keywords": ["security", "5g-aka", "authentication", "privacy", "suci", "supi", "ausf"],
    },
    "TS 23.501": {
        "title": "System architecture for the 5G System (5GS)",
        "version": "17.8.0",
        "release": "Rel-17",
        "working_group": "SA2",
        "status": "Published",
        "publication_date": "2023-09-01",
        "summary": (
            "Defines the overall system architecture for 5G including network functions, service-based "
            "architecture, interfaces, and reference points."
        ),
        "dependencies": ["TS 23.502", "TS 29.500"],
        "keywords": ["architecture", "5g", "network-functions", "sba", "amf", "smf", "upf"],
    },
    "TS 23.502": {
        "title": "Procedures for the 5G System (5GS)",
        "version": "17.8.0",
        "release": "Rel-17",
        "working_group": "SA2",
        "status": "Published",
        "publication_date": "2023-09-01",
        "summary": (
            "Specifies detailed procedures for 5G system operations including registration, "
            "authentication, session establishment, mobility management, and service operations."
        ),
        "dependencies": ["TS 23.501", "TS 33.501"],
        "keywords": ["procedures", "5g", "registration", "session", "mobility", "pdu-session"],
    },
}

# Defaults for specifications without a canned record
DEFAULT_VERSION = "17.0.0"
DEFAULT_RELEASE = "Rel-17"
DEFAULT_WORKING_GROUP = "Unknown"
DEFAULT_STATUS = "Published"
DEFAULT_PUBLICATION_DATE = "2023-01-01"
DEFAULT_SUMMARY = "Technical specification for 3GPP telecommunications systems."

# Search universe, in result order
SEARCHABLE_SPECIFICATIONS = (
    "TS 32.290", "TS 32.240", "TS 32.251", "TS 32.255",
    "TS 38.331", "TS 38.300", "TS 38.211",
    "TS 33.501", "TS 33.220", "TS 33.210",
    "TS 23.501", "TS 23.502", "TS 23.503",
)

RELEASE_RECORDS = {
    "Rel-17": {
        "freeze_date": "2022-06-01",
        "status": "Published",
        "specifications": ["TS 23.501", "TS 23.502", "TS 32.290", "TS 33.501", "TS 38.331"],
        "major_features": [
            "5G Advanced features",
            "Enhanced Industrial IoT",
            "Extended Reality (XR)",
            "NR-Light/RedCap",
            "Multi-cast broadcast services",
            "Enhanced positioning",
        ],
    },
    "Rel-16": {
        "freeze_date": "2021-06-01",
        "status": "Published",
        "specifications": ["TS 23.501", "TS 23.502", "TS 32.255", "TS 33.501"],
        "major_features": [
            "5G Phase 2",
            "URLLC enhancements",
            "Industrial IoT",
            "Vehicle-to-Everything (V2X)",
            "Positioning services",
            "Network automation",
        ],
    },
    "Rel-15": {
        "freeze_date": "2020-06-01",
        "status": "Published",
        "specifications": ["TS 23.501", "TS 23.502", "TS 38.300"],
        "major_features": [
            "5G Phase 1",
            "New Radio (NR)",
            "Service-based architecture",
            "Network slicing",
            "Enhanced mobile broadband",
        ],
    },
}

WORKING_GROUP_RECORDS = {
    "SA2": {
        "full_name": "Service and System Aspects Working Group 2",
        "focus_area": "System architecture and services",
        "specifications": ["TS 23.501", "TS 23.502", "TS 23.503", "TS 29.500"],
        "chairperson": "TBD",
    },
    "SA3": {
        "full_name": "Service and System Aspects Working Group 3",
        "focus_area": "Security",
        "specifications": ["TS 33.501", "TS 33.220", "TS 33.210"],
        "chairperson": "TBD",
    },
    "SA5": {
        "full_name": "Service and System Aspects Working Group 5",
        "focus_area": "Telecom management",
        "specifications": ["TS 32.240", "TS 32.290", "TS 32.251", "TS 32.255"],
        "chairperson": "TBD",
    },
    "RAN2": {
        "full_name": "Radio Access Network Working Group 2",
        "focus_area": "Radio interface protocols and procedures",
        "specifications": ["TS 38.331", "TS 38.300", "TS 36.331"],
        "chairperson": "TBD",
    },
}
