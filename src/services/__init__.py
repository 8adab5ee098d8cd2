"""
服务层
提供 Data Broker、报表 Broker 以及默认装配
"""

from services.data_broker import DataBroker, ServerDataBroker
from services.report_broker import ReportHandler, ServerReportBroker
from services.configuration import add_server_data_services, add_server_report_services

__all__ = [
    "DataBroker",
    "ServerDataBroker",
    "ReportHandler",
    "ServerReportBroker",
    "add_server_data_services",
    "add_server_report_services",
]
