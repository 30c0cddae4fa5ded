"""
Purchases App - Class Shop Purchase Requests

A student asks to redeem points for one unit of a product; a teacher
approves (points and stock are deducted) or rejects the request.

Architecture:
- Models: PurchaseRequest (with name and price snapshot)
- Services: PurchaseWorkflowService
- Views: RESTful API with a ViewSet
- Exceptions: Domain exception hierarchy on apps.core.exceptions
"""

__version__ = '1.0.0'
