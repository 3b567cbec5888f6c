"""
Quick demo script to run the dashboard API locally.

Needs DATABASE_URL pointing at a database with the invoices, customers and
revenue tables.
"""

import uvicorn

if __name__ == "__main__":
    print("=" * 60)
    print("Starting Acme Dashboard API")
    print("=" * 60)
    print()
    print("API Endpoints:")
    print("   - Health Check:     GET http://localhost:8000/health")
    print("   - Revenue Chart:    GET http://localhost:8000/dashboard/revenue")
    print("   - Latest Invoices:  GET http://localhost:8000/dashboard/latest-invoices")
    print("   - Cards:            GET http://localhost:8000/dashboard/cards")
    print("   - Invoices:         GET http://localhost:8000/invoices?query=&page=1")
    print("   - Customers:        GET http://localhost:8000/customers?query=&page=1")
    print("   - API Docs:             http://localhost:8000/docs")
    print()
    print("Test with curl:")
    print('   curl "http://localhost:8000/invoices?query=paid&page=2"')
    print()
    print("=" * 60)
    print("Starting server on http://localhost:8000")
    print("Press Ctrl+C to stop")
    print("=" * 60)
    print()

    uvicorn.run(
        "dashboard.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
