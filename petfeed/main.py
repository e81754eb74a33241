"""
Pet Feeding Calculator API - Main Application

A stateless service exposing the feeding calculators and the food
recommendation engine. Callers send the pet profile and catalog products
with each request; nothing is stored.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from petfeed import __version__
from petfeed.core.app_logging import configure_logging
from petfeed.core.config import settings
from petfeed.api import calculator, prices, recommendations, tools

configure_logging(settings.LOG_LEVEL)

# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    description="""
    ## Pet Feeding Calculator API

    Daily feeding amounts and food recommendations for dogs and cats.

    ### Features
    - Energy requirements (RER/DER) by activity level and neuter status
    - Daily grams for one food, or a calorie split across two foods
    - Energy density estimates from a guaranteed analysis (Modified Atwater)
    - Price position of a product against its price history
    - Allergen-aware food ranking with explanations
    - Pet age in human years

    ### Core Endpoints
    - `/calculator` - Energy and feeding amounts
    - `/price` - Price position and yearly range
    - `/recommend` - Ranked and scored products
    - `/tools` - Pet age conversion
    """,
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(calculator.router)
app.include_router(prices.router)
app.include_router(recommendations.router)
app.include_router(tools.router)


@app.get("/")
def root():
    """Root endpoint with API information."""
    return {
        "name": settings.APP_NAME,
        "version": __version__,
        "docs": "/docs",
        "endpoints": {
            "calculator": "/calculator",
            "prices": "/price",
            "recommendations": "/recommend",
            "tools": "/tools",
        }
    }


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
