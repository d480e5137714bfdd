"""
Inventory Forecast

Short-horizon demand forecasting service.

Layer Structure:
- Domain: Entities, forecasting services and collaborator interfaces
- Application: Use cases and DTOs
- Infrastructure: MongoDB database, repository, gateway and seeder
- Presentation: FastAPI controllers
- Shared: Cross-cutting concerns and shared utilities
- Main: Composition root, application entry points and configuration
"""
