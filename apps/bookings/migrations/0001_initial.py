import django.core.validators
import django.db.models.deletion
import uuid
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('fleet', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Reservation',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('start_date', models.DateField()),
                ('end_date', models.DateField()),
                ('total_price', models.DecimalField(decimal_places=2, default=0, max_digits=10, validators=[django.core.validators.MinValueValidator(0)])),
                ('car', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='reservations', to='fleet.car')),
                ('insurance', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='reservations', to='fleet.insuranceoption')),
                ('location', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='reservations', to='fleet.location')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='reservations', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Reservation',
                'verbose_name_plural': 'Reservations',
                'db_table': 'reservations',
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='ReservationAccessory',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('accessory', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='reservation_links', to='fleet.accessory')),
                ('reservation', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='accessory_links', to='bookings.reservation')),
            ],
            options={
                'db_table': 'reservation_accessories',
            },
        ),
        migrations.AddField(
            model_name='reservation',
            name='accessories',
            field=models.ManyToManyField(blank=True, related_name='reservations', through='bookings.ReservationAccessory', to='fleet.accessory'),
        ),
        migrations.AddConstraint(
            model_name='reservationaccessory',
            constraint=models.UniqueConstraint(fields=('reservation', 'accessory'), name='uq_reservation_accessory'),
        ),
    ]
