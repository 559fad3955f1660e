from __future__ import annotations

import logging
import sqlite3
from typing import Any, Dict, List

from db.repos.companies_repo import CompaniesRepo
from pipelines.runner import RunContext


logger = logging.getLogger(__name__)


DEMO_COMPANIES: List[Dict[str, Any]] = [
    # AI
    {
        "name": "NeuralFlow AI",
        "description": "Advanced neural network optimization for edge computing devices",
        "website": "https://neuralflow.ai",
        "location": "San Francisco, CA",
        "year_founded": 2021,
        "headcount": 45,
        "industry": "AI",
        "sector": "Software",
        "funding_stage": "Series A",
        "total_funding": 12_000_000,
        "revenue": 2_500_000,
        "growth_rate": 180,
        "employee_growth_rate": 120,
        "key_technologies": ["Neural Networks", "Edge Computing", "TensorFlow", "CUDA"],
        "competitive_position": "Emerging",
        "acquisition_suitability": 8,
        "investment_potential": 9,
        "patents": 3,
        "technical_differentiators": ["Proprietary neural compression", "Real-time optimization"],
    },
    {
        "name": "DataMind Corp",
        "description": "Enterprise AI platform for predictive analytics and automation",
        "website": "https://datamind.com",
        "location": "Boston, MA",
        "year_founded": 2019,
        "headcount": 120,
        "industry": "AI",
        "sector": "Platform",
        "funding_stage": "Series B",
        "total_funding": 35_000_000,
        "revenue": 8_500_000,
        "growth_rate": 145,
        "employee_growth_rate": 85,
        "key_technologies": ["Machine Learning", "AutoML", "Python", "Kubernetes"],
        "competitive_position": "Challenger",
        "acquisition_suitability": 7,
        "investment_potential": 8,
        "patents": 8,
        "technical_differentiators": ["No-code ML platform", "Enterprise integration"],
    },
    # IoT
    {
        "name": "ConnectEdge Systems",
        "description": "Industrial IoT sensors and edge computing solutions",
        "website": "https://connectedge.io",
        "location": "Austin, TX",
        "year_founded": 2020,
        "headcount": 65,
        "industry": "IoT",
        "sector": "Hardware",
        "funding_stage": "Series A",
        "total_funding": 18_000_000,
        "revenue": 4_200_000,
        "growth_rate": 220,
        "employee_growth_rate": 95,
        "key_technologies": ["LoRaWAN", "Edge Computing", "ARM Cortex", "MQTT"],
        "competitive_position": "Emerging",
        "acquisition_suitability": 9,
        "investment_potential": 8,
        "patents": 12,
        "technical_differentiators": ["Ultra-low power design", "Mesh networking"],
    },
    {
        "name": "SmartGrid Dynamics",
        "description": "IoT solutions for smart grid and energy management",
        "website": "https://smartgriddynamics.com",
        "location": "Denver, CO",
        "year_founded": 2018,
        "headcount": 85,
        "industry": "IoT",
        "sector": "Infrastructure",
        "funding_stage": "Series B",
        "total_funding": 28_000_000,
        "revenue": 6_800_000,
        "growth_rate": 165,
        "employee_growth_rate": 70,
        "key_technologies": ["Zigbee", "WiFi 6", "Time Series DB", "React"],
        "competitive_position": "Challenger",
        "acquisition_suitability": 6,
        "investment_potential": 7,
        "patents": 15,
        "technical_differentiators": ["Grid-scale optimization", "Predictive maintenance"],
    },
    # Cybersecurity
    {
        "name": "SecureVault Technologies",
        "description": "Zero-trust security platform for cloud-native applications",
        "website": "https://securevault.tech",
        "location": "Seattle, WA",
        "year_founded": 2020,
        "headcount": 55,
        "industry": "Cybersecurity",
        "sector": "Software",
        "funding_stage": "Seed",
        "total_funding": 8_500_000,
        "revenue": 1_800_000,
        "growth_rate": 280,
        "employee_growth_rate": 140,
        "key_technologies": ["Zero Trust", "Kubernetes", "Go", "gRPC"],
        "competitive_position": "Emerging",
        "acquisition_suitability": 8,
        "investment_potential": 9,
        "patents": 2,
        "technical_differentiators": ["Container-native security", "Policy automation"],
    },
    {
        "name": "ThreatShield AI",
        "description": "AI-powered threat detection and response for enterprises",
        "website": "https://threatshield.ai",
        "location": "New York, NY",
        "year_founded": 2019,
        "headcount": 95,
        "industry": "Cybersecurity",
        "sector": "Platform",
        "funding_stage": "Series A",
        "total_funding": 22_000_000,
        "revenue": 5_200_000,
        "growth_rate": 195,
        "employee_growth_rate": 110,
        "key_technologies": ["Machine Learning", "SIEM", "Python", "Elasticsearch"],
        "competitive_position": "Challenger",
        "acquisition_suitability": 7,
        "investment_potential": 8,
        "patents": 6,
        "technical_differentiators": ["Behavioral analytics", "Real-time response"],
    },
    # Fintech
    {
        "name": "PayFlow Innovations",
        "description": "B2B payment infrastructure for emerging markets",
        "website": "https://payflow.co",
        "location": "Miami, FL",
        "year_founded": 2021,
        "headcount": 35,
        "industry": "Fintech",
        "sector": "Infrastructure",
        "funding_stage": "Seed",
        "total_funding": 6_000_000,
        "revenue": 1_200_000,
        "growth_rate": 320,
        "employee_growth_rate": 180,
        "key_technologies": ["Blockchain", "Node.js", "PostgreSQL", "Redis"],
        "competitive_position": "Emerging",
        "acquisition_suitability": 9,
        "investment_potential": 9,
        "patents": 1,
        "technical_differentiators": ["Cross-border optimization", "Regulatory compliance"],
    },
    {
        "name": "CreditAI Labs",
        "description": "Alternative credit scoring using machine learning",
        "website": "https://creditai.com",
        "location": "Chicago, IL",
        "year_founded": 2020,
        "headcount": 42,
        "industry": "Fintech",
        "sector": "Software",
        "funding_stage": "Series A",
        "total_funding": 15_000_000,
        "revenue": 3_100_000,
        "growth_rate": 240,
        "employee_growth_rate": 125,
        "key_technologies": ["Machine Learning", "Python", "Apache Spark", "Kafka"],
        "competitive_position": "Emerging",
        "acquisition_suitability": 8,
        "investment_potential": 8,
        "patents": 4,
        "technical_differentiators": ["Alternative data sources", "Real-time scoring"],
    },
    # Healthtech
    {
        "name": "BioSense Diagnostics",
        "description": "Wearable biosensors for continuous health monitoring",
        "website": "https://biosense.health",
        "location": "Palo Alto, CA",
        "year_founded": 2019,
        "headcount": 78,
        "industry": "Healthtech",
        "sector": "Hardware",
        "funding_stage": "Series B",
        "total_funding": 32_000_000,
        "revenue": 7_200_000,
        "growth_rate": 175,
        "employee_growth_rate": 90,
        "key_technologies": ["Biosensors", "Bluetooth LE", "Flutter", "TensorFlow Lite"],
        "competitive_position": "Challenger",
        "acquisition_suitability": 7,
        "investment_potential": 8,
        "patents": 18,
        "technical_differentiators": ["Non-invasive monitoring", "FDA approval"],
    },
    {
        "name": "MedFlow AI",
        "description": "AI-powered clinical workflow optimization for hospitals",
        "website": "https://medflow.ai",
        "location": "Philadelphia, PA",
        "year_founded": 2020,
        "headcount": 52,
        "industry": "Healthtech",
        "sector": "Software",
        "funding_stage": "Series A",
        "total_funding": 19_000_000,
        "revenue": 4_500_000,
        "growth_rate": 210,
        "employee_growth_rate": 105,
        "key_technologies": ["Natural Language Processing", "FHIR", "React", "MongoDB"],
        "competitive_position": "Emerging",
        "acquisition_suitability": 8,
        "investment_potential": 9,
        "patents": 5,
        "technical_differentiators": ["Clinical NLP", "EHR integration"],
    },
]

# Presence of any of these means the demo set was already seeded
DEMO_MARKER_NAMES = ["NeuralFlow AI", "DataMind Corp", "ConnectEdge Systems"]


class LoadDemoCompanies:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn

    def run(self, ctx: RunContext) -> RunContext:
        repo = CompaniesRepo(self.conn)
        existing = repo.find_names(DEMO_MARKER_NAMES)
        if existing:
            logger.info("Demo companies already exist", extra={"op": "load_demo", "status": "skipped"})
            ctx.companies = []
            ctx.meta["demo_already_seeded"] = True
            return ctx
        ctx.companies = [dict(c) for c in DEMO_COMPANIES]
        ctx.meta["demo_already_seeded"] = False
        return ctx
