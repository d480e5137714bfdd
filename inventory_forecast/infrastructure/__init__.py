"""
Infrastructure Layer Package

Framework and driver specific implementations: MongoDB access, the forecast
repository, the sales history gateway and the demo data seeder.
"""
