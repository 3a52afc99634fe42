from rest_framework import serializers


class DashboardStatsSerializer(serializers.Serializer):
    date = serializers.DateField()
    total_patients = serializers.IntegerField()
    todays_opd_appointments = serializers.IntegerField()
    available_beds = serializers.IntegerField()
    occupied_beds = serializers.IntegerField()
    monthly_revenue = serializers.DecimalField(max_digits=14, decimal_places=2)
