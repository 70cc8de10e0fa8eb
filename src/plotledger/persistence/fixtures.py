"""Bundled demo data for the in-memory backend and the seed script."""

from __future__ import annotations

from typing import Any

DEMO_RECORDS: list[dict[str, Any]] = [
    {
        "ID": "1", "NAME_OF_NODE": "VASHI", "SECTOR_NO_": "17", "BLOCK_ROAD_NAME": "A",
        "PLOT_NO_": "12", "PLOT_NO_AFTER_SURVEY": "12", "UID": "VSH-17-A-12",
        "DATE_OF_ALLOTMENT": "12/03/1984", "NAME_OF_ORIGINAL_ALLOTTEE": "R. K. PATIL",
        "PLOT_AREA_SQM_": "450.00", "USE_OF_PLOT_ACCORDING_TO_FILE": "COMMERCIAL",
        "TOTAL_PRICE_RS_": "₹2,45,000", "LEASE_TERM_YEARS_": "60",
        "PLOT_AREA_FOR_INVOICE": "450.00", "PLOT_USE_FOR_INVOICE": "COMMERCIAL",
        "Additional_Plot_Count": "1", "Department_Remark": "ESTATE",
    },
    {
        "ID": "2", "NAME_OF_NODE": "VASHI", "SECTOR_NO_": "17", "BLOCK_ROAD_NAME": "A",
        "PLOT_NO_": "13", "PLOT_NO_AFTER_SURVEY": "13", "UID": "VSH-17-A-13",
        "NAME_OF_ORIGINAL_ALLOTTEE": "S. M. DESAI", "NAME_OF_2ND_OWNER": "A. DESAI",
        "_2ND_OWNER_TRANSFER_DATE": "04/11/2001",
        "PLOT_AREA_FOR_INVOICE": "1,200.50 sqm", "PLOT_USE_FOR_INVOICE": "RESIDENTIAL",
        "Additional_Plot_Count": "2", "Department_Remark": "ESTATE",
    },
    {
        "ID": "3", "NAME_OF_NODE": "VASHI", "SECTOR_NO_": "9", "BLOCK_ROAD_NAME": "B",
        "PLOT_NO_": "4", "PLOT_NO_AFTER_SURVEY": "4A",
        "PLOT_AREA_FOR_INVOICE": "₹1,23,456.00", "PLOT_USE_FOR_INVOICE": "Residential + Commercial",
        "Additional_Plot_Count": "0", "Department_Remark": "MARKETING",
    },
    {
        "ID": "4", "NAME_OF_NODE": "VASHI", "SECTOR_NO_": "9", "BLOCK_ROAD_NAME": "C",
        "PLOT_NO_": "7", "PLOT_NO_AFTER_SURVEY": "7",
        "PLOT_AREA_FOR_INVOICE": "980", "PLOT_USE_FOR_INVOICE": "INDUSTRIAL",
        "Additional_Plot_Count": "3 plots", "Department_Remark": "",
    },
    {
        "ID": "5", "NAME_OF_NODE": "VASHI", "SECTOR_NO_": "10A", "BLOCK_ROAD_NAME": "D",
        "PLOT_NO_": "1", "PLOT_NO_AFTER_SURVEY": "1",
        "PLOT_AREA_FOR_INVOICE": "N/A", "PLOT_USE_FOR_INVOICE": "PUBLIC UTILITY",
        "Additional_Plot_Count": "5", "Department_Remark": "PLANNING",
    },
    {
        "ID": "6", "NAME_OF_NODE": "NERUL", "SECTOR_NO_": "2", "BLOCK_ROAD_NAME": "EAST",
        "PLOT_NO_": "21", "PLOT_NO_AFTER_SURVEY": "21",
        "PLOT_AREA_FOR_INVOICE": "300.25", "PLOT_USE_FOR_INVOICE": "SERVICE INDUSTRY",
        "Additional_Plot_Count": "", "Department_Remark": "ESTATE",
    },
    {
        "ID": "7", "NAME_OF_NODE": "NERUL", "SECTOR_NO_": "2", "BLOCK_ROAD_NAME": "EAST",
        "PLOT_NO_": "22", "PLOT_NO_AFTER_SURVEY": "22",
        "PLOT_AREA_FOR_INVOICE": "725.75", "PLOT_USE_FOR_INVOICE": "",
        "Additional_Plot_Count": "1", "Department_Remark": "LEGAL",
    },
    {
        "ID": "8", "NAME_OF_NODE": "NERUL", "SECTOR_NO_": "19", "BLOCK_ROAD_NAME": "WEST",
        "PLOT_NO_": "3", "PLOT_NO_AFTER_SURVEY": "3",
        "PLOT_AREA_FOR_INVOICE": "2,000", "PLOT_USE_FOR_INVOICE": "EDUCATIONAL",
        "Additional_Plot_Count": "0", "Department_Remark": "PLANNING",
    },
    {
        "ID": "9", "NAME_OF_NODE": "NERUL", "SECTOR_NO_": "19", "BLOCK_ROAD_NAME": "WEST",
        "PLOT_NO_": "5", "PLOT_NO_AFTER_SURVEY": "5",
        "PLOT_AREA_FOR_INVOICE": "640.00 INR", "PLOT_USE_FOR_INVOICE": "COMMERCIAL",
        "Additional_Plot_Count": "2", "Department_Remark": "MARKETING",
    },
    {
        "ID": "10", "NAME_OF_NODE": "BELAPUR", "SECTOR_NO_": "15", "BLOCK_ROAD_NAME": "CBD",
        "PLOT_NO_": "8", "PLOT_NO_AFTER_SURVEY": "8",
        "PLOT_AREA_FOR_INVOICE": "1500", "PLOT_USE_FOR_INVOICE": "RESIDENTIAL",
        "Additional_Plot_Count": "4", "Department_Remark": "ESTATE",
    },
]

DEMO_USERS: list[dict[str, Any]] = [
    {
        "id": "1",
        "username": "admin",
        "email": "admin@plotledger.local",
        "role": "admin",
        "name": "Administrator",
        # sha256("admin")
        "password_hash": "8c6976e5b5410415bde908bd4dee15dfb167a9c873fc4bb8a81f6f2ab448a918",
    },
]
