"""JSON serialization for API responses."""

from datetime import date, datetime

from carbon_market.domain.admin import ProjectSales, RecentOrder
from carbon_market.domain.calculations import CalculationRecord
from carbon_market.domain.footprint import ImpactEquivalents
from carbon_market.domain.orders import Order, OrderItem
from carbon_market.domain.projects import Project, ProjectDetail, ProjectPage
from carbon_market.domain.reviews import Review
from carbon_market.domain.sales import SoldItem
from carbon_market.rounding import round_half_up
from carbon_market.services.admin import AdminStats
from carbon_market.services.footprint import impact_equivalents
from carbon_market.services.orders import DashboardSummary
from carbon_market.services.portfolio import Holding, Portfolio
from carbon_market.services.seller import SellerStats


def _iso(value: date | datetime | None) -> str | None:
    return value.isoformat() if value else None


def serialize_impact(impact: ImpactEquivalents) -> dict[str, object]:
    return {
        "treesPlanted": impact.trees_planted,
        "milesDrivenOffset": impact.miles_driven_offset,
        "homesPoweredYears": impact.homes_powered_years,
        "flightsOffset": impact.flights_offset,
    }


def serialize_project_card(project: Project) -> dict[str, object]:
    """Catalog card fields shared by listings."""
    return {
        "id": str(project.id),
        "title": project.title,
        "description": project.description,
        "category": project.category,
        "pricePerCredit": project.price_per_credit,
        "location": project.location,
        "country": project.country,
        "standard": project.standard,
        "sdgGoals": project.sdg_goals,
        "imageUrl": project.image_url,
        "availableCredits": project.available_credits,
        "totalCredits": project.total_credits,
        "rating": round_half_up(project.average_rating, 1),
        "reviewCount": project.review_count,
        "isVerraCertified": project.is_certified,
        "createdAt": _iso(project.created_at),
    }


def serialize_project_page(page: ProjectPage) -> dict[str, object]:
    return {
        "projects": [serialize_project_card(project) for project in page.projects],
        "pagination": {
            "page": page.page,
            "limit": page.limit,
            "total": page.total,
            "totalPages": page.total_pages,
        },
        "countries": page.countries,
    }


def serialize_review(review: Review) -> dict[str, object]:
    return {
        "id": str(review.id),
        "projectId": str(review.project_id),
        "userId": str(review.user_id),
        "userName": review.user_name,
        "rating": review.rating,
        "title": review.title,
        "comment": review.comment,
        "helpfulCount": review.helpful_count,
        "createdAt": _iso(review.created_at),
    }


def serialize_project_detail(detail: ProjectDetail) -> dict[str, object]:
    """Full project page, including seller, reviews and price history."""
    project = detail.project
    payload = serialize_project_card(project)
    payload.update(
        {
            "latitude": project.latitude,
            "longitude": project.longitude,
            "images": project.images,
            "isActive": project.is_active,
            "seller": (
                {
                    "id": str(detail.seller.id),
                    "name": detail.seller.name,
                    "email": detail.seller.email,
                }
                if detail.seller
                else None
            ),
            "reviews": [serialize_review(review) for review in detail.reviews],
            "priceHistory": [
                {"date": _iso(point.day), "price": point.price}
                for point in detail.price_history
            ],
        }
    )
    return payload


def serialize_map_marker(project: Project) -> dict[str, object]:
    return {
        "id": str(project.id),
        "title": project.title,
        "category": project.category,
        "country": project.country,
        "latitude": project.latitude,
        "longitude": project.longitude,
        "pricePerCredit": project.price_per_credit,
    }


def serialize_calculation(record: CalculationRecord) -> dict[str, object]:
    return {
        "id": str(record.id),
        "totalEmissions": record.total_emissions,
        "transportation": record.transportation,
        "homeEnergy": record.home_energy,
        "diet": record.diet,
        "travel": record.travel,
        "inputData": record.input_data,
        "createdAt": _iso(record.created_at),
    }


def _serialize_order_item(item: OrderItem) -> dict[str, object]:
    return {
        "id": str(item.id),
        "projectId": str(item.project_id),
        "quantity": item.quantity,
        "pricePerCredit": item.price_per_credit,
        "project": {
            "id": str(item.project.id),
            "title": item.project.title,
            "category": item.project.category,
            "imageUrl": item.project.image_url,
            "location": item.project.location,
            "country": item.project.country,
            "pricePerCredit": item.project.price_per_credit,
        },
    }


def serialize_order(order: Order) -> dict[str, object]:
    """Order with its items and the impact of its credits."""
    return {
        "id": str(order.id),
        "totalAmount": order.total_amount,
        "status": order.status,
        "paymentMethod": order.payment_method,
        "createdAt": _iso(order.created_at),
        "creditCount": order.credit_count,
        "items": [_serialize_order_item(item) for item in order.items],
        "impactEquivalents": serialize_impact(impact_equivalents(order.credit_count)),
    }


def serialize_dashboard(summary: DashboardSummary) -> dict[str, object]:
    return {
        "totalCredits": summary.total_credits,
        "totalSpent": round_half_up(summary.total_spent, 2),
        "totalCO2": summary.total_co2,
        "projectCount": summary.project_count,
        "yearlyGoal": summary.yearly_goal,
        "goalProgressPercent": round_half_up(summary.goal_progress_percent, 1),
        "tonsRemaining": summary.tons_remaining,
        "timeline": [
            {
                "date": _iso(point.day),
                "credits": point.credits,
                "cumulative": point.cumulative,
            }
            for point in summary.timeline
        ],
        "impactEquivalents": serialize_impact(summary.impact),
    }


def _serialize_holding(holding: Holding) -> dict[str, object]:
    project = holding.project
    return {
        "projectId": str(project.id),
        "title": project.title,
        "category": project.category,
        "imageUrl": project.image_url,
        "location": project.location,
        "country": project.country,
        "totalCredits": holding.total_credits,
        "totalValue": round_half_up(holding.total_value, 2),
        "currentValue": round_half_up(holding.current_value, 2),
        "avgPurchasePrice": round_half_up(holding.avg_purchase_price, 2),
        "purchaseCount": len(holding.purchases),
        "firstPurchase": _iso(holding.first_purchase),
        "purchases": [
            {
                "date": _iso(purchase.purchased_at),
                "quantity": purchase.quantity,
                "price": purchase.price,
            }
            for purchase in holding.purchases
        ],
    }


def serialize_portfolio(portfolio: Portfolio) -> dict[str, object]:
    return {
        "totalCredits": portfolio.total_credits,
        "totalSpent": round_half_up(portfolio.total_spent, 2),
        "totalOrders": portfolio.total_orders,
        "holdings": [_serialize_holding(holding) for holding in portfolio.holdings],
        "categoryBreakdown": [
            {"category": category, "credits": credits}
            for category, credits in portfolio.category_breakdown.items()
        ],
        "timeline": [
            {"date": _iso(entry.day), "credits": entry.credits, "amount": entry.amount}
            for entry in portfolio.timeline
        ],
        "impactEquivalents": serialize_impact(portfolio.impact),
        "recentOrders": [serialize_order(order) for order in portfolio.recent_orders],
    }


def _serialize_sold_item(item: SoldItem) -> dict[str, object]:
    return {
        "id": str(item.id),
        "projectId": str(item.project_id),
        "projectTitle": item.project_title,
        "quantity": item.quantity,
        "pricePerCredit": item.price_per_credit,
        "revenue": round_half_up(item.revenue, 2),
        "buyerName": item.buyer_name,
        "buyerEmail": item.buyer_email,
        "createdAt": _iso(item.ordered_at),
    }


def serialize_seller_stats(stats: SellerStats) -> dict[str, object]:
    """Seller dashboard payload."""
    return {
        "stats": {
            "totalRevenue": stats.total_revenue,
            "totalCreditsSold": stats.total_credits_sold,
            "activeProjects": stats.active_projects,
            "avgRating": stats.avg_rating,
            "totalReviews": stats.total_reviews,
            "totalProjects": stats.total_projects,
        },
        "revenueData": [
            {"month": entry.month, "revenue": entry.revenue, "credits": entry.credits}
            for entry in stats.revenue_data
        ],
        "projectPerformance": [
            {
                "name": entry.short_name,
                "creditsSold": entry.credits_sold,
                "revenue": round_half_up(entry.revenue, 2),
            }
            for entry in stats.performance
        ],
        "projects": [
            {
                **serialize_project_card(entry.project),
                "isActive": entry.project.is_active,
                "creditsSold": entry.credits_sold,
                "revenue": round_half_up(entry.revenue, 2),
            }
            for entry in stats.performance
        ],
        "recentOrders": [_serialize_sold_item(item) for item in stats.recent_sales],
    }


def _serialize_recent_order(order: RecentOrder) -> dict[str, object]:
    return {
        "id": str(order.id),
        "userName": order.user_name,
        "totalAmount": order.total_amount,
        "status": order.status,
        "createdAt": _iso(order.created_at),
    }


def _serialize_top_project(project: ProjectSales) -> dict[str, object]:
    return {
        "id": str(project.id),
        "title": project.title,
        "country": project.country,
        "pricePerCredit": project.price_per_credit,
        "creditsSold": project.credits_sold,
        "revenue": round_half_up(project.revenue, 2),
    }


def serialize_admin_stats(stats: AdminStats) -> dict[str, object]:
    return {
        "totalUsers": stats.total_users,
        "usersByRole": [
            {"role": entry.role, "count": entry.count}
            for entry in stats.users_by_role
        ],
        "totalProjects": stats.total_projects,
        "totalOrders": stats.total_orders,
        "totalRevenue": round_half_up(stats.total_revenue, 2),
        "totalCreditsTraded": stats.total_credits_traded,
        "recentOrders": [
            _serialize_recent_order(order) for order in stats.recent_orders
        ],
        "topProjects": [
            _serialize_top_project(project) for project in stats.top_projects
        ],
    }
