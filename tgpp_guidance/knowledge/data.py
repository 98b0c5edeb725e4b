# tgpp_guidance/knowledge/data.py
"""Static knowledge tables loaded into the knowledge graph at startup.

Rows are plain dicts keyed by the entity field names in
:mod:`tgpp_guidance.knowledge.types`. Table order matters: it is the
tie-break order for specification ranking.
"""

# =============================================================================
# SPECIFICATIONS
# =============================================================================

SPECIFICATIONS = [
    # 5G NAS
    {
        "id": "TS 24.501",
        "title": "5G System (5GS) Non-Access-Stratum (NAS) protocol",
        "series": "24",
        "release": "Rel-16",
        "working_group": "CT1",
        "purpose": "Defines the NAS protocol for 5G systems including registration, session management, and mobility",
        "key_topics": ["5G NAS", "Registration", "Session Management", "Authentication", "Security Mode"],
        "dependencies": ["TS 33.501", "TS 23.501"],
        "related_specs": ["TS 24.301", "TS 33.501", "TS 29.518"],
        "search_keywords": ["5GS", "NAS", "5G-AKA", "SUCI", "SUPI", "Registration", "PDU Session"],
        "common_questions": [
            "How does 5G authentication work?",
            "What is SUCI and how is it different from IMSI?",
            "How do 5G registration procedures work?",
            "What are PDU sessions in 5G?",
        ],
        "implementation_notes": [
            "Implement SUCI encryption for identity protection",
            "Support both 5G-AKA and EAP-AKA' authentication",
            "Handle service-based architecture interactions",
            "Implement proper security context management",
        ],
        "evolution_notes": "Major evolution from TS 24.301 with enhanced security, service-based architecture, and network slicing support",
    },
    # 4G NAS
    {
        "id": "TS 24.301",
        "title": "Non-Access-Stratum (NAS) protocol for Evolved Packet System (EPS)",
        "series": "24",
        "release": "Rel-15",
        "working_group": "CT1",
        "purpose": "Defines the NAS protocol for 4G LTE systems including attach, authentication, and mobility",
        "key_topics": ["EPS NAS", "Attach", "Authentication", "Tracking Area Update", "Bearer Management"],
        "dependencies": ["TS 33.401", "TS 23.401"],
        "related_specs": ["TS 24.501", "TS 33.401", "TS 29.274"],
        "search_keywords": ["EPS", "LTE", "NAS", "EPS-AKA", "IMSI", "Attach", "Bearer"],
        "common_questions": [
            "How does LTE attach procedure work?",
            "What is EPS-AKA authentication?",
            "How does bearer management work in LTE?",
            "What are the differences between EMM and ESM?",
        ],
        "implementation_notes": [
            "Implement proper IMSI handling",
            "Support EPS-AKA authentication procedures",
            "Handle bearer activation and modification",
            "Implement tracking area procedures",
        ],
    },
    # 5G RRC
    {
        "id": "TS 38.331",
        "title": "NR Radio Resource Control (RRC) protocol specification",
        "series": "38",
        "release": "Rel-16",
        "working_group": "RAN2",
        "purpose": "Defines the RRC protocol for 5G NR including connection management, mobility, and measurements",
        "key_topics": ["5G RRC", "Connection Setup", "Handover", "Measurements", "System Information"],
        "dependencies": ["TS 38.300", "TS 38.321"],
        "related_specs": ["TS 36.331", "TS 38.321", "TS 38.413"],
        "search_keywords": ["NR", "5G RRC", "gNB", "Handover", "Connection Setup", "SIB", "Measurements"],
        "common_questions": [
            "How does 5G RRC connection establishment work?",
            "What are the differences between 4G and 5G RRC?",
            "How do 5G handovers work?",
            "What is beam management in 5G?",
        ],
        "implementation_notes": [
            "Implement beam management procedures",
            "Support dual connectivity scenarios",
            "Handle new 5G measurement events",
            "Implement proper RRC state machine",
        ],
        "evolution_notes": "Evolution from TS 36.331 with beam management, dual connectivity, and enhanced mobility",
    },
    # 5G security
    {
        "id": "TS 33.501",
        "title": "Security architecture and procedures for 5G System",
        "series": "33",
        "release": "Rel-16",
        "working_group": "SA3",
        "purpose": "Defines the security architecture, procedures, and algorithms for 5G systems",
        "key_topics": ["5G Security", "Authentication", "Key Management", "Privacy", "Network Slicing Security"],
        "dependencies": ["TS 23.501", "TS 24.501"],
        "related_specs": ["TS 33.401", "TS 29.518", "TS 35.208"],
        "search_keywords": ["5G Security", "SUCI", "SUPI", "5G-AKA", "AUSF", "SEAF", "Key Derivation"],
        "common_questions": [
            "How does 5G security architecture work?",
            "What is SUCI and how does it protect privacy?",
            "How are keys derived in 5G?",
            "What security improvements does 5G offer over 4G?",
        ],
        "implementation_notes": [
            "Implement SUCI/SUPI conversion",
            "Support enhanced security algorithms",
            "Handle network slicing security",
            "Implement proper key management",
        ],
        "evolution_notes": "Major security enhancements over TS 33.401 with identity protection and enhanced algorithms",
    },
    # 5G system architecture
    {
        "id": "TS 23.501",
        "title": "System architecture for the 5G System (5GS)",
        "series": "23",
        "release": "Rel-16",
        "working_group": "SA2",
        "purpose": "Defines the overall 5G system architecture including network functions and interfaces",
        "key_topics": ["5G Architecture", "Network Functions", "Service Based Architecture", "Network Slicing"],
        "dependencies": [],
        "related_specs": ["TS 23.502", "TS 29.500", "TS 28.530"],
        "search_keywords": ["5GS", "SBA", "AMF", "SMF", "UPF", "Network Slicing", "Service Based"],
        "common_questions": [
            "What is 5G service-based architecture?",
            "What are the main 5G network functions?",
            "How does network slicing work?",
            "What are the differences between 4G and 5G architecture?",
        ],
        "implementation_notes": [
            "Implement service-based interfaces",
            "Support network slicing architecture",
            "Handle cloud-native deployment",
            "Implement proper service discovery",
        ],
    },
    # Charging architecture and principles
    {
        "id": "TS 32.240",
        "title": "Charging architecture and principles",
        "series": "32",
        "release": "Rel-17",
        "working_group": "SA5",
        "purpose": "Defines common principles and logical architecture for charging across all 3GPP domains and services",
        "key_topics": ["Charging Architecture", "Online Charging", "Offline Charging", "Charging Principles", "CTF", "CDF"],
        "dependencies": [],
        "related_specs": ["TS 32.251", "TS 32.255", "TS 32.290", "TS 32.299"],
        "search_keywords": ["charging", "billing", "CTF", "CDF", "OCS", "OFCS", "charging architecture"],
        "common_questions": [
            "What is the 3GPP charging architecture?",
            "What is the difference between online and offline charging?",
            "What is a CTF and CDF?",
            "How does charging work across different domains?",
        ],
        "implementation_notes": [
            "Implement charging trigger functions (CTF)",
            "Support both online and offline charging",
            "Handle charging data collection",
            "Implement proper CDR generation",
        ],
        "evolution_notes": "Foundation specification that defines charging principles used across all 3GPP generations",
    },
    # PS domain charging (4G)
    {
        "id": "TS 32.251",
        "title": "Packet Switched (PS) domain charging",
        "series": "32",
        "release": "Rel-16",
        "working_group": "SA5",
        "purpose": "Defines offline and online charging for 4G/LTE packet switched services",
        "key_topics": ["PS Charging", "LTE Charging", "Bearer Charging", "PCRF", "PGW Charging", "SGW Charging"],
        "dependencies": ["TS 32.240", "TS 23.401"],
        "related_specs": ["TS 32.299", "TS 23.203", "TS 29.212"],
        "search_keywords": ["PS charging", "LTE charging", "bearer charging", "PGW", "SGW", "PCRF", "Gx", "Gy", "Gz"],
        "common_questions": [
            "How does 4G LTE charging work?",
            "What is bearer-based charging?",
            "How does policy control affect charging?",
            "What are Gy and Gz interfaces?",
        ],
        "implementation_notes": [
            "Implement bearer-based charging",
            "Support policy control integration",
            "Handle volume and time-based charging",
            "Implement proper CDR correlation",
        ],
        "evolution_notes": "Enhanced from 3G charging with bearer concept and policy control integration",
    },
    # 5G data connectivity charging
    {
        "id": "TS 32.255",
        "title": "5G data connectivity domain charging",
        "series": "32",
        "release": "Rel-17",
        "working_group": "SA5",
        "purpose": "Defines charging for 5G data connectivity including PDU sessions and QoS flows",
        "key_topics": ["5G Charging", "PDU Session Charging", "QoS Flow Charging", "Network Slice Charging", "SMF Charging"],
        "dependencies": ["TS 32.240", "TS 23.501", "TS 32.290"],
        "related_specs": ["TS 32.290", "TS 23.502", "TS 29.512"],
        "search_keywords": ["5G charging", "PDU session", "QoS flow", "network slice", "SMF", "UPF", "Nchf"],
        "common_questions": [
            "How does 5G charging differ from 4G?",
            "What is PDU session charging?",
            "How are QoS flows charged?",
            "How does network slicing affect charging?",
        ],
        "implementation_notes": [
            "Implement PDU session-based charging",
            "Support QoS flow differentiation",
            "Handle network slice charging",
            "Implement service-based charging interfaces",
        ],
        "evolution_notes": "Evolution from bearer-based to PDU session-based charging with enhanced granularity",
    },
    # 5G SBI charging
    {
        "id": "TS 32.290",
        "title": "5G system; Services, operations and procedures of charging using Service Based Interface (SBI)",
        "series": "32",
        "release": "Rel-17",
        "working_group": "SA5",
        "purpose": "Defines converged charging system using 5G Service Based Interface architecture",
        "key_topics": ["Converged Charging", "CHF", "Service Based Charging", "Nchf Interface", "Charging Services"],
        "dependencies": ["TS 32.240", "TS 23.501"],
        "related_specs": ["TS 32.291", "TS 29.594", "TS 32.255"],
        "search_keywords": ["converged charging", "CHF", "Nchf", "SBI charging", "5G charging", "service based"],
        "common_questions": [
            "What is converged charging in 5G?",
            "How does CHF work?",
            "What is the Nchf interface?",
            "How does service-based charging differ from traditional charging?",
        ],
        "implementation_notes": [
            "Implement converged online/offline charging",
            "Support HTTP/2 based charging interfaces",
            "Handle service-based architecture patterns",
            "Implement RESTful charging APIs",
        ],
        "evolution_notes": "Revolutionary change from Diameter-based to HTTP/2 REST-based charging architecture",
    },
    # 5G charging service stage 3
    {
        "id": "TS 32.291",
        "title": "5G system; Charging service; Stage 3",
        "series": "32",
        "release": "Rel-17",
        "working_group": "SA5",
        "purpose": "Defines detailed stage 3 specification for 5G charging service implementation",
        "key_topics": ["Charging Service Implementation", "OpenAPI", "HTTP/2 Charging", "JSON Charging Records"],
        "dependencies": ["TS 32.290", "TS 29.500"],
        "related_specs": ["TS 32.290", "TS 29.594"],
        "search_keywords": ["charging service", "OpenAPI", "HTTP/2", "JSON CDR", "stage 3", "implementation"],
        "common_questions": [
            "How to implement 5G charging service?",
            "What are the OpenAPI specifications for charging?",
            "How are JSON charging records structured?",
            "What are the HTTP/2 charging procedures?",
        ],
        "implementation_notes": [
            "Follow OpenAPI specifications exactly",
            "Implement proper HTTP/2 handling",
            "Support JSON-based charging records",
            "Handle service discovery for charging",
        ],
    },
    # Diameter charging applications
    {
        "id": "TS 32.299",
        "title": "Diameter charging applications",
        "series": "32",
        "release": "Rel-16",
        "working_group": "SA5",
        "purpose": "Defines Diameter-based online and offline charging applications for 3GPP networks",
        "key_topics": ["Diameter Charging", "Ro Interface", "Rf Interface", "AVP", "CCR", "CCA"],
        "dependencies": ["TS 32.240"],
        "related_specs": ["TS 32.251", "TS 32.255", "RFC 6733"],
        "search_keywords": ["Diameter", "Ro", "Rf", "CCR", "CCA", "AVP", "online charging", "offline charging"],
        "common_questions": [
            "How does Diameter charging work?",
            "What are Ro and Rf interfaces?",
            "What are CCR and CCA messages?",
            "How are AVPs structured in charging?",
        ],
        "implementation_notes": [
            "Implement Diameter protocol stack",
            "Support Ro (online) and Rf (offline) applications",
            "Handle proper AVP encoding/decoding",
            "Implement credit control procedures",
        ],
        "evolution_notes": "Evolution from RADIUS to Diameter with enhanced AVP structure and procedures",
    },
    # Policy and charging control (4G)
    {
        "id": "TS 23.203",
        "title": "Policy and charging control architecture",
        "series": "23",
        "release": "Rel-15",
        "working_group": "SA2",
        "purpose": "Defines policy control and charging architecture for 4G EPS networks",
        "key_topics": ["Policy Control", "PCRF", "PCEF", "OCS", "SPR", "Gx Interface", "Gy Interface"],
        "dependencies": ["TS 23.401"],
        "related_specs": ["TS 29.212", "TS 29.214", "TS 32.251"],
        "search_keywords": ["policy control", "PCRF", "PCEF", "Gx", "Gy", "Rx", "policy rules", "charging control"],
        "common_questions": [
            "How does policy control work in 4G?",
            "What is the role of PCRF?",
            "How does policy affect charging?",
            "What are Gx and Gy interfaces?",
        ],
        "implementation_notes": [
            "Implement PCRF functionality",
            "Support dynamic policy rules",
            "Handle charging control integration",
            "Implement proper interface procedures",
        ],
    },
    # 5G policy and charging control signalling
    {
        "id": "TS 29.513",
        "title": "5G System; Policy and Charging Control signalling flows and QoS parameter mapping",
        "series": "29",
        "release": "Rel-16",
        "working_group": "CT3",
        "purpose": "Defines policy and charging control signalling for 5G systems",
        "key_topics": ["5G Policy Control", "PCF", "Npcf Interface", "QoS Control", "Charging Control"],
        "dependencies": ["TS 23.501", "TS 29.500"],
        "related_specs": ["TS 29.514", "TS 32.255"],
        "search_keywords": ["Npcf", "PCF", "5G policy", "QoS control", "charging control", "policy rules"],
        "common_questions": [
            "How does 5G policy control work?",
            "What is the Npcf interface?",
            "How does PCF control charging?",
            "What are 5G policy rules?",
        ],
        "implementation_notes": [
            "Implement service-based policy control",
            "Support HTTP/2 based Npcf interface",
            "Handle QoS and charging integration",
            "Implement RESTful policy APIs",
        ],
        "evolution_notes": "Evolution from Diameter-based PCRF to HTTP/2-based PCF with enhanced capabilities",
    },
    # 5G policy authorization
    {
        "id": "TS 29.514",
        "title": "5G System; Policy Authorization Service; Stage 3",
        "series": "29",
        "release": "Rel-16",
        "working_group": "CT3",
        "purpose": "Defines detailed implementation of 5G Policy Control Function services",
        "key_topics": ["Policy Authorization", "PCF Services", "Session Management Policy", "Access Mobility Policy"],
        "dependencies": ["TS 29.513", "TS 29.500"],
        "related_specs": ["TS 29.512", "TS 32.290"],
        "search_keywords": ["policy authorization", "PCF services", "session policy", "mobility policy", "stage 3"],
        "common_questions": [
            "How to implement PCF services?",
            "What are the PCF authorization procedures?",
            "How does session management policy work?",
            "What are access and mobility policies?",
        ],
        "implementation_notes": [
            "Implement all PCF service operations",
            "Support policy decision algorithms",
            "Handle session and mobility policies",
            "Implement proper authorization procedures",
        ],
    },
]

# =============================================================================
# PROTOCOLS
# =============================================================================

PROTOCOLS = [
    {
        "name": "NAS",
        "full_name": "Non-Access Stratum",
        "layer": "L3",
        "purpose": "Handles communication between UE and core network for mobility and session management",
        "defining_specs": ["TS 24.301", "TS 24.501"],
        "related_protocols": ["RRC", "HTTP/2"],
        "procedures": [
            {
                "name": "Authentication",
                "description": "Mutual authentication between UE and network",
                "trigger_conditions": ["Initial attach", "Security context update", "Network request"],
                "key_steps": ["Authentication challenge", "Response computation", "Verification", "Key establishment"],
                "related_procedures": ["Registration", "Security Mode"],
                "common_issues": ["Authentication failures", "Key synchronization", "Identity privacy"],
                "debugging_tips": ["Check authentication vectors", "Verify key derivation", "Analyze failure causes"],
            },
            {
                "name": "Registration",
                "description": "UE registration with the network",
                "trigger_conditions": ["Power on", "Area change", "Periodic update"],
                "key_steps": ["Registration request", "Authentication", "Security setup", "Registration completion"],
                "related_procedures": ["Authentication", "Session Establishment"],
                "common_issues": ["Registration rejections", "Timer expiry", "Network congestion"],
                "debugging_tips": ["Check registration cause", "Verify network capability", "Analyze reject causes"],
            },
        ],
        "common_use_cases": ["Device authentication", "Network registration", "Session management", "Mobility management"],
        "troubleshooting_areas": ["Authentication failures", "Registration issues", "Session problems", "Security context errors"],
    },
    {
        "name": "RRC",
        "full_name": "Radio Resource Control",
        "layer": "L3",
        "purpose": "Controls radio resources and manages UE connections with the radio access network",
        "defining_specs": ["TS 36.331", "TS 38.331"],
        "related_protocols": ["NAS", "PDCP", "RLC"],
        "procedures": [
            {
                "name": "Connection Establishment",
                "description": "Establishes RRC connection between UE and base station",
                "trigger_conditions": ["Data transmission", "Signaling need", "Emergency call"],
                "key_steps": ["Connection request", "Connection setup", "Connection complete"],
                "related_procedures": ["Authentication", "Security Mode"],
                "common_issues": ["Connection failures", "Resource shortage", "Random access problems"],
                "debugging_tips": ["Check RACH procedures", "Verify resource availability", "Analyze failure reasons"],
            },
        ],
        "common_use_cases": ["Connection management", "Mobility control", "Resource allocation", "Measurement control"],
        "troubleshooting_areas": ["Connection failures", "Handover issues", "Measurement problems", "Resource conflicts"],
    },
    {
        "name": "CHF",
        "full_name": "Charging Function",
        "layer": "Application",
        "purpose": "5G converged charging system that unifies online and offline charging capabilities",
        "defining_specs": ["TS 32.290", "TS 32.291"],
        "related_protocols": ["PCF", "SMF", "AMF"],
        "procedures": [
            {
                "name": "Charging Data Request",
                "description": "Request charging information for network events",
                "trigger_conditions": ["Session establishment", "QoS change", "Handover", "Session termination"],
                "key_steps": ["Charging request", "Quota allocation", "Usage monitoring", "Charging response"],
                "related_procedures": ["Session Management", "Policy Control"],
                "common_issues": ["Quota exhaustion", "Charging data inconsistency", "Service interruption"],
                "debugging_tips": ["Check CHF service status", "Verify charging records", "Monitor quota usage"],
            },
            {
                "name": "Converged Charging",
                "description": "Unified online and offline charging process",
                "trigger_conditions": ["Any chargeable event", "Service usage", "Network resource consumption"],
                "key_steps": ["Event detection", "Charging data collection", "Rating", "Balance update", "CDR generation"],
                "related_procedures": ["Policy Control", "QoS Management"],
                "common_issues": ["Rating failures", "Balance synchronization", "CDR correlation"],
                "debugging_tips": ["Verify rating rules", "Check balance updates", "Analyze CDR sequences"],
            },
        ],
        "common_use_cases": ["Real-time charging", "Postpaid billing", "Quota management", "Service monetization"],
        "troubleshooting_areas": ["Charging failures", "Quota issues", "Rating problems", "CDR generation errors"],
    },
    {
        "name": "OCS",
        "full_name": "Online Charging System",
        "layer": "Application",
        "purpose": "Real-time charging system that controls service access based on account balance",
        "defining_specs": ["TS 32.240", "TS 32.299"],
        "related_protocols": ["PCRF", "PCEF", "PGW"],
        "procedures": [
            {
                "name": "Credit Control",
                "description": "Real-time credit authorization and monitoring",
                "trigger_conditions": ["Service request", "Quota threshold", "Service termination"],
                "key_steps": ["Credit request", "Balance check", "Quota grant", "Usage monitoring", "Final report"],
                "related_procedures": ["Session Management", "Service Control"],
                "common_issues": ["Credit exhaustion", "Quota management", "Service interruption"],
                "debugging_tips": ["Check account balance", "Monitor quota usage", "Verify credit control messages"],
            },
            {
                "name": "Balance Management",
                "description": "Account balance tracking and updates",
                "trigger_conditions": ["Service usage", "Recharge", "Billing cycle"],
                "key_steps": ["Usage collection", "Rating", "Balance deduction", "Threshold monitoring"],
                "related_procedures": ["Credit Control", "Billing"],
                "common_issues": ["Balance inconsistency", "Rating errors", "Synchronization problems"],
                "debugging_tips": ["Audit balance changes", "Verify rating calculations", "Check synchronization logs"],
            },
        ],
        "common_use_cases": ["Prepaid services", "Real-time billing", "Service control", "Fraud prevention"],
        "troubleshooting_areas": ["Credit control failures", "Balance issues", "Service blocking", "Rating problems"],
    },
    {
        "name": "PCRF",
        "full_name": "Policy and Charging Rules Function",
        "layer": "Application",
        "purpose": "4G policy control and charging rules management for EPC networks",
        "defining_specs": ["TS 23.203", "TS 29.212"],
        "related_protocols": ["PCEF", "OCS", "SPR"],
        "procedures": [
            {
                "name": "Policy Control",
                "description": "Dynamic policy rule creation and enforcement",
                "trigger_conditions": ["Session establishment", "Service request", "Network conditions"],
                "key_steps": ["Policy decision", "Rule generation", "Rule installation", "Rule enforcement"],
                "related_procedures": ["Charging Control", "QoS Management"],
                "common_issues": ["Policy conflicts", "Rule installation failures", "Enforcement errors"],
                "debugging_tips": ["Check policy rules", "Verify rule installation", "Monitor enforcement actions"],
            },
            {
                "name": "Charging Control",
                "description": "Integration between policy and charging systems",
                "trigger_conditions": ["Policy rule activation", "Service usage", "Quota events"],
                "key_steps": ["Charging rule creation", "OCS interaction", "Quota monitoring", "Policy enforcement"],
                "related_procedures": ["Policy Control", "Credit Control"],
                "common_issues": ["Charging rule errors", "OCS communication", "Quota synchronization"],
                "debugging_tips": ["Verify charging rules", "Check OCS connectivity", "Monitor quota status"],
            },
        ],
        "common_use_cases": ["Dynamic policy enforcement", "Service differentiation", "Charging control", "QoS management"],
        "troubleshooting_areas": ["Policy rule issues", "Charging integration", "Service quality problems", "Rule conflicts"],
    },
    {
        "name": "PCF",
        "full_name": "Policy Control Function",
        "layer": "Application",
        "purpose": "5G policy control function that manages policies and charging for service-based architecture",
        "defining_specs": ["TS 29.513", "TS 29.514"],
        "related_protocols": ["CHF", "SMF", "AMF"],
        "procedures": [
            {
                "name": "Policy Authorization",
                "description": "5G policy decision and authorization process",
                "trigger_conditions": ["PDU session establishment", "Policy change", "Network slice selection"],
                "key_steps": ["Policy request", "Context analysis", "Policy decision", "Authorization response"],
                "related_procedures": ["Session Management", "Charging Control"],
                "common_issues": ["Authorization failures", "Policy conflicts", "Context errors"],
                "debugging_tips": ["Check policy context", "Verify authorization rules", "Analyze decision logic"],
            },
            {
                "name": "Session Management Policy",
                "description": "PDU session-specific policy control",
                "trigger_conditions": ["Session request", "QoS change", "Network conditions"],
                "key_steps": ["Session analysis", "Policy selection", "Rule creation", "Policy enforcement"],
                "related_procedures": ["QoS Management", "Charging Control"],
                "common_issues": ["Session policy errors", "QoS conflicts", "Rule enforcement"],
                "debugging_tips": ["Verify session policies", "Check QoS parameters", "Monitor rule enforcement"],
            },
        ],
        "common_use_cases": ["5G policy control", "Network slicing policies", "Service-based charging", "QoS management"],
        "troubleshooting_areas": ["Policy authorization", "Session management", "Charging integration", "Service quality"],
    },
    {
        "name": "DIAMETER",
        "full_name": "Diameter Protocol",
        "layer": "Application",
        "purpose": "AAA protocol used for charging and policy control in 3GPP networks",
        "defining_specs": ["TS 32.299", "RFC 6733"],
        "related_protocols": ["PCRF", "OCS", "HSS"],
        "procedures": [
            {
                "name": "Credit Control Request",
                "description": "Diameter-based credit control messaging for charging",
                "trigger_conditions": ["Service start", "Interim update", "Service end"],
                "key_steps": ["CCR message creation", "AVP population", "Message transmission", "CCA processing"],
                "related_procedures": ["Session Management", "Accounting"],
                "common_issues": ["Message format errors", "AVP encoding issues", "Session state conflicts"],
                "debugging_tips": ["Validate message format", "Check AVP values", "Monitor session state"],
            },
            {
                "name": "Accounting",
                "description": "Diameter accounting for offline charging",
                "trigger_conditions": ["Accounting start", "Interim accounting", "Accounting stop"],
                "key_steps": ["ACR creation", "Usage data collection", "Message transmission", "ACA processing"],
                "related_procedures": ["Credit Control", "Session Management"],
                "common_issues": ["Accounting record loss", "Data inconsistency", "Message correlation"],
                "debugging_tips": ["Check accounting records", "Verify data integrity", "Trace message flow"],
            },
        ],
        "common_use_cases": ["Online charging", "Offline charging", "Policy control", "Authentication"],
        "troubleshooting_areas": ["Message format issues", "Protocol state errors", "Connection problems", "AVP encoding"],
    },
]

# =============================================================================
# CONCEPTS
# =============================================================================

CONCEPTS = [
    {
        "name": "SUCI",
        "full_name": "Subscription Concealed Identifier",
        "category": "Security",
        "description": "Privacy-preserving identifier that conceals the permanent identifier (SUPI)",
        "purpose": "Protect subscriber privacy by avoiding transmission of permanent identifiers in clear text",
        "related_concepts": ["SUPI", "IMSI", "ECIES"],
        "specifications": ["TS 33.501", "TS 24.501"],
        "evolution_from": "IMSI",
        "usage_context": ["Initial authentication", "Identity verification", "Privacy protection"],
    },
    {
        "name": "SUPI",
        "full_name": "Subscription Permanent Identifier",
        "category": "Identity",
        "description": "Permanent subscriber identifier in 5G systems",
        "purpose": "Uniquely identify subscribers in 5G networks",
        "related_concepts": ["SUCI", "IMSI", "NAI"],
        "specifications": ["TS 23.501", "TS 33.501"],
        "evolution_from": "IMSI",
        "usage_context": ["Subscriber management", "Authentication", "Billing"],
    },
    {
        "name": "5G-AKA",
        "full_name": "5G Authentication and Key Agreement",
        "category": "Security",
        "description": "Primary authentication method for 5G systems",
        "purpose": "Provide mutual authentication and establish security keys",
        "related_concepts": ["EPS-AKA", "AUSF", "Authentication Vector"],
        "specifications": ["TS 33.501", "TS 24.501"],
        "evolution_from": "EPS-AKA",
        "usage_context": ["Initial authentication", "Re-authentication", "Key establishment"],
    },
    {
        "name": "CHF",
        "full_name": "Charging Function",
        "category": "Network Function",
        "description": "5G network function providing converged online and offline charging services",
        "purpose": "Unify charging operations in 5G service-based architecture with HTTP/2 REST APIs",
        "related_concepts": ["Converged Charging", "Nchf", "CDR", "Quota Management"],
        "specifications": ["TS 32.290", "TS 32.291"],
        "evolution_from": "OCS/OFCS",
        "usage_context": ["5G charging", "Service-based charging", "Network slicing charging"],
    },
    {
        "name": "Converged Charging",
        "full_name": "Converged Online and Offline Charging",
        "category": "Architecture",
        "description": "5G charging approach that unifies online and offline charging in a single system",
        "purpose": "Simplify charging architecture and enable flexible charging models",
        "related_concepts": ["CHF", "Online Charging", "Offline Charging", "CDR"],
        "specifications": ["TS 32.290", "TS 32.240"],
        "evolution_from": "Separate Online/Offline Systems",
        "usage_context": ["5G networks", "Service monetization", "Real-time billing"],
    },
    {
        "name": "CDR",
        "full_name": "Call Detail Record",
        "category": "Billing",
        "description": "Structured record containing details of network service usage for billing purposes",
        "purpose": "Provide detailed usage information for billing, analytics, and regulatory compliance",
        "related_concepts": ["Charging", "Billing", "Usage Monitoring", "Rating"],
        "specifications": ["TS 32.240", "TS 32.251", "TS 32.255"],
        "usage_context": ["Offline charging", "Billing systems", "Revenue assurance", "Analytics"],
    },
    {
        "name": "Quota Management",
        "full_name": "Service Quota Management",
        "category": "Charging Control",
        "description": "Real-time monitoring and control of service usage against allocated quotas",
        "purpose": "Enable prepaid services and prevent service abuse through usage limits",
        "related_concepts": ["Online Charging", "Credit Control", "Balance Management", "Service Control"],
        "specifications": ["TS 32.240", "TS 32.299"],
        "usage_context": ["Prepaid services", "Service control", "Fraud prevention", "Resource management"],
    },
    {
        "name": "Rating",
        "full_name": "Service Rating and Tariffing",
        "category": "Billing",
        "description": "Process of applying tariff rules to convert usage measurements into monetary charges",
        "purpose": "Transform technical usage data into billable amounts based on tariff plans",
        "related_concepts": ["Tariff", "Billing", "Usage", "Charging"],
        "specifications": ["TS 32.240", "TS 32.296"],
        "usage_context": ["Billing systems", "Revenue calculation", "Price plan application"],
    },
    {
        "name": "Ro Interface",
        "full_name": "Diameter Ro Interface",
        "category": "Interface",
        "description": "Diameter-based interface between network elements and Online Charging System",
        "purpose": "Enable real-time credit control and online charging for prepaid services",
        "related_concepts": ["Online Charging", "Diameter", "Credit Control", "OCS"],
        "specifications": ["TS 32.299"],
        "evolution_from": "RADIUS interfaces",
        "usage_context": ["Online charging", "Prepaid services", "Real-time billing"],
    },
    {
        "name": "Rf Interface",
        "full_name": "Diameter Rf Interface",
        "category": "Interface",
        "description": "Diameter-based interface for offline charging data collection",
        "purpose": "Transport charging records from network elements to charging systems",
        "related_concepts": ["Offline Charging", "Diameter", "CDR", "Accounting"],
        "specifications": ["TS 32.299"],
        "evolution_from": "GTP' interfaces",
        "usage_context": ["Offline charging", "CDR collection", "Postpaid billing"],
    },
    {
        "name": "Nchf Interface",
        "full_name": "5G Charging Function Interface",
        "category": "Interface",
        "description": "HTTP/2 REST-based interface for 5G converged charging services",
        "purpose": "Provide service-based charging interface in 5G networks",
        "related_concepts": ["CHF", "Service Based Interface", "HTTP/2", "REST API"],
        "specifications": ["TS 32.290", "TS 29.594"],
        "evolution_from": "Diameter Ro/Rf",
        "usage_context": ["5G charging", "Service-based architecture", "Cloud-native charging"],
    },
    {
        "name": "OCS",
        "full_name": "Online Charging System",
        "category": "System",
        "description": "Real-time charging system that authorizes service usage based on account balance",
        "purpose": "Enable prepaid services and real-time spending control",
        "related_concepts": ["Credit Control", "Balance Management", "Quota Management", "Ro Interface"],
        "specifications": ["TS 32.240", "TS 32.299"],
        "usage_context": ["Prepaid services", "Real-time billing", "Service control"],
    },
    {
        "name": "OFCS",
        "full_name": "Offline Charging System",
        "category": "System",
        "description": "Post-processing charging system that collects and processes usage records for billing",
        "purpose": "Generate bills for postpaid services based on collected usage data",
        "related_concepts": ["CDR", "Billing", "Usage Collection", "Rf Interface"],
        "specifications": ["TS 32.240", "TS 32.299"],
        "usage_context": ["Postpaid services", "Billing generation", "Usage analytics"],
    },
    {
        "name": "PCRF",
        "full_name": "Policy and Charging Rules Function",
        "category": "Network Function",
        "description": "4G network function that manages policy rules and charging control",
        "purpose": "Provide dynamic policy control and integrate with charging systems",
        "related_concepts": ["Policy Control", "QoS", "Charging Control", "Gx Interface"],
        "specifications": ["TS 23.203", "TS 29.212"],
        "evolution_from": "Static policy systems",
        "usage_context": ["4G networks", "Policy enforcement", "Dynamic QoS", "Charging control"],
    },
    {
        "name": "PCF",
        "full_name": "Policy Control Function",
        "category": "Network Function",
        "description": "5G network function providing policy decisions and charging control",
        "purpose": "Enable dynamic policy control in service-based 5G architecture",
        "related_concepts": ["Policy Control", "Service Based Architecture", "Npcf Interface", "Charging Control"],
        "specifications": ["TS 29.513", "TS 29.514"],
        "evolution_from": "PCRF",
        "usage_context": ["5G networks", "Network slicing", "Service-based policy", "Dynamic charging"],
    },
    {
        "name": "Session-Based Charging",
        "full_name": "Session-Based Charging Model",
        "category": "Charging Model",
        "description": "Charging approach where costs are associated with communication sessions",
        "purpose": "Enable charging based on session establishment, duration, and resource usage",
        "related_concepts": ["PDU Session", "Bearer", "Session Management", "Time-based Charging"],
        "specifications": ["TS 32.240", "TS 32.255"],
        "usage_context": ["Voice calls", "Data sessions", "Application sessions"],
    },
    {
        "name": "Event-Based Charging",
        "full_name": "Event-Based Charging Model",
        "category": "Charging Model",
        "description": "Charging approach where costs are associated with specific network events",
        "purpose": "Enable charging for discrete services and transactions",
        "related_concepts": ["Charging Events", "Transaction Charging", "Service Events"],
        "specifications": ["TS 32.240"],
        "usage_context": ["SMS", "Location services", "Content downloads", "API calls"],
    },
    {
        "name": "Volume-Based Charging",
        "full_name": "Volume-Based Charging Model",
        "category": "Charging Model",
        "description": "Charging approach based on data volume consumption",
        "purpose": "Enable charging proportional to data usage",
        "related_concepts": ["Data Usage", "Quota Management", "Usage Monitoring"],
        "specifications": ["TS 32.251", "TS 32.255"],
        "usage_context": ["Data services", "Internet access", "Content streaming"],
    },
    {
        "name": "Network Slice Charging",
        "full_name": "5G Network Slice Charging",
        "category": "Charging Model",
        "description": "Specialized charging for 5G network slices with different service characteristics",
        "purpose": "Enable differentiated charging based on network slice properties and SLAs",
        "related_concepts": ["Network Slicing", "Service Differentiation", "SLA Charging", "Slice SLA"],
        "specifications": ["TS 32.255", "TS 28.530"],
        "evolution_from": "Service-based charging",
        "usage_context": ["5G networks", "Enterprise services", "IoT services", "Edge computing"],
    },
]

# =============================================================================
# RESEARCH PATTERNS
# =============================================================================

RESEARCH_PATTERNS = [
    {
        "name": "Protocol Analysis",
        "description": "Systematic approach to understanding a new 3GPP protocol",
        "applicable_for": ["New protocol learning", "Implementation planning", "Troubleshooting"],
        "steps": [
            {
                "phase": "Overview",
                "tasks": ["Read protocol purpose", "Understand layer position", "Identify key procedures"],
                "deliverables": ["Protocol summary", "Context understanding"],
                "tips": ["Start with architecture specs", "Use visual diagrams when available"],
            },
            {
                "phase": "Deep Dive",
                "tasks": ["Study message formats", "Understand state machines", "Analyze error conditions"],
                "deliverables": ["Detailed understanding", "Implementation requirements"],
                "tips": ["Focus on most common procedures first", "Create your own diagrams"],
            },
        ],
        "expected_outputs": ["Complete protocol understanding", "Implementation roadmap", "Testing strategy"],
        "common_pitfalls": ["Skipping architectural context", "Ignoring error conditions", "Not understanding dependencies"],
        "time_estimate": "2-4 weeks for complex protocols",
    },
    {
        "name": "Security Analysis",
        "description": "Comprehensive approach to understanding 3GPP security features",
        "applicable_for": ["Security implementation", "Vulnerability assessment", "Compliance checking"],
        "steps": [
            {
                "phase": "Architecture",
                "tasks": ["Understand security architecture", "Identify security functions", "Map trust boundaries"],
                "deliverables": ["Security model", "Threat analysis"],
                "tips": ["Start with TS 33.501 for 5G", "Use security sequence diagrams"],
            },
            {
                "phase": "Implementation",
                "tasks": ["Study key management", "Understand algorithms", "Analyze attack mitigations"],
                "deliverables": ["Security requirements", "Implementation guide"],
                "tips": ["Focus on key derivation flows", "Understand algorithm negotiation"],
            },
        ],
        "expected_outputs": ["Security architecture understanding", "Implementation requirements", "Security test plan"],
        "common_pitfalls": ["Ignoring key management", "Not understanding algorithm choices", "Missing privacy requirements"],
        "time_estimate": "3-6 weeks for comprehensive analysis",
    },
    {
        "name": "Charging Architecture Analysis",
        "description": "Comprehensive approach to understanding 3GPP charging systems and architectures",
        "applicable_for": ["Charging system design", "Billing implementation", "Revenue assurance", "System integration"],
        "steps": [
            {
                "phase": "Foundation",
                "tasks": ["Study TS 32.240 charging principles", "Understand online vs offline charging", "Learn charging data flow"],
                "deliverables": ["Charging architecture overview", "System component mapping"],
                "tips": ["Start with charging principles", "Focus on data flows", "Understand business requirements"],
            },
            {
                "phase": "Technology Deep-dive",
                "tasks": ["Study generation-specific specs (4G: TS 32.251, 5G: TS 32.255)", "Analyze interface specifications", "Understand protocol details"],
                "deliverables": ["Technical specifications understanding", "Interface documentation"],
                "tips": ["Compare 4G vs 5G charging", "Focus on your target generation", "Study interface message flows"],
            },
            {
                "phase": "Implementation Planning",
                "tasks": ["Design charging data collection", "Plan rating and billing integration", "Define CDR structures"],
                "deliverables": ["Implementation architecture", "Integration specifications"],
                "tips": ["Consider scalability", "Plan for regulatory compliance", "Design for revenue assurance"],
            },
        ],
        "expected_outputs": ["Complete charging system understanding", "Implementation roadmap", "Integration architecture"],
        "common_pitfalls": ["Ignoring business requirements", "Not understanding rating complexities", "Missing regulatory requirements"],
        "time_estimate": "4-8 weeks for comprehensive analysis",
    },
    {
        "name": "Policy Control Integration",
        "description": "Systematic approach to understanding policy control and charging integration",
        "applicable_for": ["Policy system implementation", "Dynamic charging", "QoS management", "Service differentiation"],
        "steps": [
            {
                "phase": "Policy Architecture",
                "tasks": ["Study policy architecture (4G: TS 23.203, 5G: PCF)", "Understand policy decision points", "Learn charging integration"],
                "deliverables": ["Policy architecture understanding", "Integration points mapping"],
                "tips": ["Focus on policy-charging integration", "Understand dynamic rule creation", "Study interface specifications"],
            },
            {
                "phase": "Implementation Design",
                "tasks": ["Design policy rules engine", "Plan charging control integration", "Define service differentiation"],
                "deliverables": ["Policy engine design", "Charging integration plan"],
                "tips": ["Consider rule conflicts", "Plan for real-time decisions", "Design for scalability"],
            },
        ],
        "expected_outputs": ["Policy control understanding", "Charging integration design", "Service differentiation plan"],
        "common_pitfalls": ["Policy rule conflicts", "Poor charging integration", "Performance issues"],
        "time_estimate": "3-6 weeks for complete understanding",
    },
    {
        "name": "5G Charging Migration",
        "description": "Structured approach to understanding and implementing 5G charging evolution",
        "applicable_for": ["5G charging implementation", "Legacy system migration", "Converged charging", "Service-based architecture"],
        "steps": [
            {
                "phase": "Evolution Understanding",
                "tasks": ["Compare 4G vs 5G charging models", "Study converged charging concept", "Understand CHF architecture"],
                "deliverables": ["Evolution analysis", "Migration requirements"],
                "tips": ["Focus on key differences", "Understand business benefits", "Study service-based architecture impact"],
            },
            {
                "phase": "Technical Analysis",
                "tasks": ["Study TS 32.290 and TS 32.291", "Understand HTTP/2 vs Diameter", "Learn JSON vs AVP structures"],
                "deliverables": ["Technical specification understanding", "Protocol comparison"],
                "tips": ["Compare interface protocols", "Understand data format changes", "Study OpenAPI specifications"],
            },
            {
                "phase": "Migration Planning",
                "tasks": ["Plan coexistence scenarios", "Design migration phases", "Define testing strategies"],
                "deliverables": ["Migration roadmap", "Coexistence architecture", "Testing plan"],
                "tips": ["Plan gradual migration", "Ensure service continuity", "Design comprehensive testing"],
            },
        ],
        "expected_outputs": ["5G charging understanding", "Migration strategy", "Implementation roadmap"],
        "common_pitfalls": ["Underestimating complexity", "Poor migration planning", "Inadequate testing"],
        "time_estimate": "6-10 weeks for complete migration planning",
    },
    {
        "name": "Billing System Integration",
        "description": "Comprehensive approach to integrating 3GPP charging with billing systems",
        "applicable_for": ["Billing system design", "CDR processing", "Revenue assurance", "Regulatory compliance"],
        "steps": [
            {
                "phase": "Requirements Analysis",
                "tasks": ["Define billing requirements", "Study regulatory compliance", "Understand revenue assurance needs"],
                "deliverables": ["Business requirements", "Compliance matrix"],
                "tips": ["Engage business stakeholders", "Study local regulations", "Consider fraud prevention"],
            },
            {
                "phase": "Data Flow Design",
                "tasks": ["Design CDR collection", "Plan data validation", "Define rating integration"],
                "deliverables": ["Data flow architecture", "Validation rules", "Rating integration"],
                "tips": ["Ensure data integrity", "Plan for high volumes", "Design error handling"],
            },
            {
                "phase": "System Integration",
                "tasks": ["Implement CDR processing", "Integrate rating systems", "Build revenue assurance"],
                "deliverables": ["Integrated billing system", "Revenue assurance system"],
                "tips": ["Test thoroughly", "Monitor performance", "Ensure scalability"],
            },
        ],
        "expected_outputs": ["Integrated billing system", "Revenue assurance capability", "Compliance framework"],
        "common_pitfalls": ["Data quality issues", "Performance problems", "Compliance gaps"],
        "time_estimate": "8-16 weeks depending on complexity",
    },
    {
        "name": "Charging Troubleshooting",
        "description": "Systematic approach to diagnosing and resolving charging system issues",
        "applicable_for": ["System troubleshooting", "Performance optimization", "Issue resolution", "System monitoring"],
        "steps": [
            {
                "phase": "Issue Identification",
                "tasks": ["Collect symptoms and logs", "Identify affected systems", "Categorize issue type"],
                "deliverables": ["Issue description", "Affected systems list"],
                "tips": ["Gather complete information", "Check multiple systems", "Look for patterns"],
            },
            {
                "phase": "Root Cause Analysis",
                "tasks": ["Analyze charging data flows", "Check interface connections", "Verify configuration"],
                "deliverables": ["Root cause identification", "Impact analysis"],
                "tips": ["Follow data flows", "Check all integration points", "Verify recent changes"],
            },
            {
                "phase": "Resolution and Prevention",
                "tasks": ["Implement fixes", "Test resolution", "Implement monitoring"],
                "deliverables": ["Issue resolution", "Prevention measures"],
                "tips": ["Test thoroughly", "Monitor for recurrence", "Update procedures"],
            },
        ],
        "expected_outputs": ["Resolved issues", "Improved monitoring", "Prevention procedures"],
        "common_pitfalls": ["Incomplete diagnosis", "Poor testing", "Recurring issues"],
        "time_estimate": "1-4 weeks depending on issue complexity",
    },
]

# =============================================================================
# RELATIONSHIPS
# (source, target, type, strength, description)
# =============================================================================

RELATIONSHIPS = [
    ("TS 24.501", "TS 33.501", "uses", 0.9, "5G NAS uses 5G security procedures"),
    ("TS 24.501", "TS 23.501", "implements", 0.8, "5G NAS implements 5G architecture"),
    ("TS 24.501", "TS 24.301", "extends", 0.7, "5G NAS extends 4G NAS concepts"),
    ("TS 38.331", "TS 36.331", "extends", 0.8, "5G RRC extends 4G RRC"),
    ("TS 33.501", "TS 33.401", "extends", 0.6, "5G security extends 4G security"),
    ("TS 23.501", "TS 23.401", "replaces", 0.7, "5G architecture replaces 4G architecture"),

    # Core charging architecture
    ("TS 32.251", "TS 32.240", "uses", 0.9, "4G PS charging uses common charging principles"),
    ("TS 32.255", "TS 32.240", "uses", 0.9, "5G charging uses common charging principles"),
    ("TS 32.290", "TS 32.240", "uses", 0.9, "5G SBI charging uses common charging principles"),
    ("TS 32.291", "TS 32.290", "implements", 0.95, "Stage 3 implements SBI charging procedures"),
    ("TS 32.299", "TS 32.240", "implements", 0.85, "Diameter charging implements common principles"),

    # Evolution
    ("TS 32.255", "TS 32.251", "extends", 0.8, "5G charging extends 4G PS charging concepts"),
    ("TS 32.290", "TS 32.299", "replaces", 0.7, "5G SBI charging replaces Diameter-based charging"),

    # Policy control and charging integration
    ("TS 23.203", "TS 32.251", "uses", 0.8, "4G policy control integrates with PS charging"),
    ("TS 29.513", "TS 32.255", "uses", 0.8, "5G policy control integrates with 5G charging"),
    ("TS 29.514", "TS 29.513", "implements", 0.9, "PCF stage 3 implements policy procedures"),

    # Architecture dependencies
    ("TS 32.255", "TS 23.501", "depends_on", 0.9, "5G charging depends on 5G system architecture"),
    ("TS 32.290", "TS 23.501", "depends_on", 0.9, "5G SBI charging depends on service-based architecture"),
    ("TS 32.251", "TS 23.401", "depends_on", 0.9, "4G PS charging depends on EPS architecture"),

    # Interfaces
    ("TS 32.299", "TS 32.251", "defines", 0.8, "Diameter charging defines PS domain interfaces"),
    ("TS 32.291", "TS 29.594", "uses", 0.7, "5G charging uses common data types"),

    # Cross-generation
    ("TS 29.513", "TS 23.203", "extends", 0.7, "5G policy extends 4G policy concepts"),
    ("TS 29.514", "TS 29.212", "extends", 0.6, "5G PCF extends 4G PCRF capabilities"),
]

# =============================================================================
# SEARCH PATTERNS
# =============================================================================

SEARCH_PATTERNS = [
    {
        "domain": "authentication",
        "keywords": ["authentication", "AKA", "SUCI", "SUPI", "identity", "privacy", "AUSF"],
        "series": ["24", "33", "29"],
        "starting_specs": ["TS 33.501", "TS 24.501"],
        "reading_order": ["architecture", "procedures", "implementation"],
        "common_mistakes": ["Ignoring privacy requirements", "Not understanding key derivation"],
        "tips": ["Start with security architecture", "Compare 4G vs 5G approaches", "Focus on identity protection"],
    },
    {
        "domain": "mobility",
        "keywords": ["handover", "mobility", "tracking area", "registration area", "cell selection"],
        "series": ["23", "24", "36", "38"],
        "starting_specs": ["TS 23.501", "TS 38.331"],
        "reading_order": ["architecture", "procedures", "optimization"],
        "common_mistakes": ["Not considering network slicing impact", "Ignoring dual connectivity"],
        "tips": ["Understand 5G mobility enhancements", "Study beam management impact", "Consider network slicing"],
    },
    {
        "domain": "session_management",
        "keywords": ["PDU session", "bearer", "QoS", "session management", "data connectivity"],
        "series": ["23", "24", "29"],
        "starting_specs": ["TS 23.501", "TS 24.501"],
        "reading_order": ["architecture", "procedures", "QoS_management"],
        "common_mistakes": ["Confusing PDU sessions with bearers", "Not understanding QoS flows"],
        "tips": ["Compare with 4G bearer concept", "Understand QoS flow mapping", "Study session continuity"],
    },
    {
        "domain": "charging",
        "keywords": ["charging", "billing", "CDR", "rating", "tariff", "quota", "balance", "revenue"],
        "series": ["32", "23", "29"],
        "starting_specs": ["TS 32.240", "TS 32.299"],
        "reading_order": ["architecture", "principles", "interfaces", "implementation"],
        "common_mistakes": ["Ignoring business requirements", "Not understanding rating complexity", "Missing data integrity"],
        "tips": ["Start with charging principles", "Understand business models", "Focus on data flow integrity", "Consider scalability from start"],
    },
    {
        "domain": "online_charging",
        "keywords": ["online charging", "OCS", "credit control", "prepaid", "real-time", "Ro", "CCR", "CCA", "quota"],
        "series": ["32"],
        "starting_specs": ["TS 32.240", "TS 32.299"],
        "reading_order": ["charging_architecture", "diameter_applications", "credit_control_procedures"],
        "common_mistakes": ["Poor quota management", "Not handling credit exhaustion", "Ignoring fraud scenarios"],
        "tips": ["Focus on real-time aspects", "Understand credit control flows", "Study quota management", "Plan for high availability"],
    },
    {
        "domain": "offline_charging",
        "keywords": ["offline charging", "OFCS", "CDR", "billing", "postpaid", "Rf", "accounting", "usage records"],
        "series": ["32"],
        "starting_specs": ["TS 32.240", "TS 32.299", "TS 32.251"],
        "reading_order": ["charging_architecture", "cdr_formats", "collection_procedures"],
        "common_mistakes": ["CDR data loss", "Poor correlation", "Missing usage data", "Inadequate validation"],
        "tips": ["Ensure CDR integrity", "Plan for high volumes", "Design proper correlation", "Implement data validation"],
    },
    {
        "domain": "5g_charging",
        "keywords": ["5G charging", "CHF", "converged charging", "Nchf", "HTTP/2", "JSON CDR", "service-based"],
        "series": ["32", "29"],
        "starting_specs": ["TS 32.290", "TS 32.291"],
        "reading_order": ["5g_architecture", "converged_charging", "sbi_interfaces", "implementation"],
        "common_mistakes": ["Ignoring migration complexity", "Not understanding HTTP/2", "Poor JSON handling"],
        "tips": ["Study service-based architecture", "Understand converged charging benefits", "Compare with 4G charging", "Focus on cloud-native aspects"],
    },
    {
        "domain": "policy_charging",
        "keywords": ["policy control", "PCRF", "PCF", "dynamic charging", "QoS", "service differentiation", "Gx", "Npcf"],
        "series": ["23", "29"],
        "starting_specs": ["TS 23.203", "TS 29.513"],
        "reading_order": ["policy_architecture", "charging_integration", "dynamic_procedures"],
        "common_mistakes": ["Policy rule conflicts", "Poor charging integration", "Not considering real-time requirements"],
        "tips": ["Understand policy-charging relationship", "Study dynamic rule creation", "Focus on integration points", "Consider performance impacts"],
    },
    {
        "domain": "diameter_charging",
        "keywords": ["Diameter", "AVP", "CCR", "CCA", "ACR", "ACA", "Ro", "Rf", "credit control", "accounting"],
        "series": ["32"],
        "starting_specs": ["TS 32.299"],
        "reading_order": ["diameter_basics", "charging_applications", "message_flows"],
        "common_mistakes": ["AVP encoding errors", "Session state issues", "Poor error handling"],
        "tips": ["Master Diameter protocol basics", "Understand AVP structure", "Study session management", "Focus on error scenarios"],
    },
    {
        "domain": "network_slice_charging",
        "keywords": ["network slice charging", "slice differentiation", "SLA charging", "service-based charging", "5G slicing"],
        "series": ["32", "28"],
        "starting_specs": ["TS 32.255", "TS 28.530"],
        "reading_order": ["slicing_architecture", "charging_differentiation", "sla_management"],
        "common_mistakes": ["Not understanding slice characteristics", "Poor SLA mapping", "Missing differentiation logic"],
        "tips": ["Study network slicing basics", "Understand service differentiation", "Focus on SLA requirements", "Design flexible charging models"],
    },
    {
        "domain": "charging_integration",
        "keywords": ["billing integration", "BSS integration", "revenue assurance", "mediation", "rating engine"],
        "series": ["32"],
        "starting_specs": ["TS 32.240"],
        "reading_order": ["integration_architecture", "data_flows", "validation_procedures"],
        "common_mistakes": ["Data quality issues", "Poor error handling", "Inadequate monitoring"],
        "tips": ["Focus on data integrity", "Design robust error handling", "Plan comprehensive monitoring", "Consider regulatory requirements"],
    },
]
